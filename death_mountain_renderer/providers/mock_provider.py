"""Deterministic stand-in for the adventurer data provider."""

import logging

from death_mountain_renderer.engine.item_catalog import MAX_ITEM_ID
from death_mountain_renderer.models.adventurer import AdventurerSnapshot
from death_mountain_renderer.models.items import BAG_SIZE, Bag, Equipment, Item
from death_mountain_renderer.models.stats import Stats

logger = logging.getLogger(__name__)

MOCK_NAMES = [
    "Bob",
    "Lady Morgana",
    "Sir Reginald the Unbreakable",
    "Thistlewick",
    "Grimbold Ironfoot of the Northern Peaks",
]

# First catalog id of each equipment family per slot: magic/cloth, blade/hide, bludgeon/metal
_FAMILY_STARTS = {
    "weapon": (9, 42, 72),
    "chest": (17, 47, 77),
    "head": (22, 52, 82),
    "waist": (27, 57, 87),
    "foot": (32, 62, 92),
    "hand": (37, 67, 97),
}


class MockAdventurerProvider:
    """Builds adventurers arithmetically from the token id; no randomness, no I/O."""

    def get_adventurer_name(self, token_id: int) -> str:
        """Name of the adventurer behind a token."""
        return MOCK_NAMES[token_id % len(MOCK_NAMES)]

    def get_adventurer(self, token_id: int) -> AdventurerSnapshot:
        """
        Snapshot for a token id.

        Token ids divisible by 7 are in battle, ids divisible by 11 are dead.

        Args:
            token_id: Token identifier

        Returns:
            AdventurerSnapshot
        """
        if token_id < 0:
            raise ValueError(f"Token id must be non-negative, got {token_id}")

        seed = token_id * 2654435761 % 2**32
        stats = Stats(
            strength=seed % 11,
            dexterity=(seed >> 4) % 11,
            vitality=(seed >> 8) % 11,
            intelligence=(seed >> 12) % 11,
            wisdom=(seed >> 16) % 11,
            charisma=(seed >> 20) % 11,
            luck=(seed >> 24) % 11,
        )
        family = token_id % 3
        tier_offset = token_id % 5
        equipment = Equipment(
            **{
                slot: Item(id=starts[family] + tier_offset, xp=(seed >> index) % 401)
                for index, (slot, starts) in enumerate(_FAMILY_STARTS.items())
            },
            neck=Item(id=1 + token_id % 3, xp=seed % 50),
            ring=Item(id=4 + token_id % 5, xp=seed % 90),
        )
        bag_size = token_id % (BAG_SIZE + 1)
        bag = Bag(items=[Item(id=1 + (seed + slot * 13) % MAX_ITEM_ID, xp=slot * 7) for slot in range(bag_size)])

        max_health = stats.max_health
        if token_id % 11 == 0:
            health = 0
        else:
            health = max_health * (1 + seed % 10) // 10
        beast_health = 0 if token_id % 7 else 20 + seed % 80

        snapshot = AdventurerSnapshot(
            name=self.get_adventurer_name(token_id),
            health=health,
            xp=seed % 5000,
            level=1 + seed % 30,
            gold=seed % 1000,
            beast_health=beast_health,
            stat_upgrades_available=seed % 3,
            stats=stats,
            equipment=equipment,
            bag=bag,
            item_specials_seed=seed % 65536,
            action_count=token_id * 3 % 2**32,
        )
        logger.debug(f"Built mock adventurer for token {token_id}")
        return snapshot
