"""Data models module for the Death Mountain renderer."""

# Stats
from death_mountain_renderer.models.stats import Stats, max_health_for

# Items, equipment and bag
from death_mountain_renderer.models.items import (
    BAG_SIZE,
    Bag,
    Equipment,
    Item,
    ItemCategory,
    ItemSlot,
    ItemView,
    Tier,
)

# Adventurer
from death_mountain_renderer.models.adventurer import AdventurerSnapshot

# Metadata
from death_mountain_renderer.models.metadata import TokenMetadata, Trait

__all__ = [
    # Stats
    "Stats",
    "max_health_for",
    # Items, equipment and bag
    "BAG_SIZE",
    "Bag",
    "Equipment",
    "Item",
    "ItemCategory",
    "ItemSlot",
    "ItemView",
    "Tier",
    # Adventurer
    "AdventurerSnapshot",
    # Metadata
    "TokenMetadata",
    "Trait",
]
