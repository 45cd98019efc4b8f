"""Adventurer snapshot model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from death_mountain_renderer.models.items import Bag, Equipment
from death_mountain_renderer.models.stats import Stats


class AdventurerSnapshot(BaseModel):
    """Complete, immutable view of one adventurer for a single render call."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(default="", description="Adventurer name (display-truncated)")

    # Vital values
    health: int = Field(default=0, ge=0, le=65535, description="Current health points")
    xp: int = Field(default=0, ge=0, le=65535, description="Experience points")
    level: int = Field(default=1, ge=0, le=255, description="Adventurer level")
    gold: int = Field(default=0, ge=0, le=65535, description="Gold carried")
    beast_health: int = Field(default=0, ge=0, le=65535, description="Health of the beast in combat (0 = no combat)")
    stat_upgrades_available: int = Field(default=0, ge=0, le=255, description="Unspent stat points")

    stats: Stats = Field(default_factory=Stats, description="Adventurer stats")
    equipment: Equipment = Field(default_factory=Equipment, description="Equipped items")
    bag: Bag = Field(default_factory=Bag, description="Bag contents")

    # Carried through for display only
    item_specials_seed: int = Field(default=0, ge=0, le=65535, description="Item specials seed")
    action_count: int = Field(default=0, ge=0, le=2**32 - 1, description="Action counter")

    @field_validator("name")
    @classmethod
    def encodable_name(cls, value: str) -> str:
        """Reject names that cannot be written as UTF-8, such as lone surrogates."""
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("name must be valid UTF-8 text") from None
        return value

    @property
    def max_health(self) -> int:
        """Maximum health derived from vitality."""
        return self.stats.max_health

    @property
    def is_dead(self) -> bool:
        """Whether the adventurer has no health left."""
        return self.health == 0

    @property
    def in_battle(self) -> bool:
        """Whether a beast is currently being fought."""
        return self.beast_health > 0
