"""Adventurer statistics models."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Base health every adventurer starts with, before vitality
BASE_HEALTH = 100
HEALTH_PER_VITALITY = 15


class Stats(BaseModel):
    """The seven adventurer stats, each an unsigned 8-bit counter."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    strength: int = Field(default=0, ge=0, le=255, description="Strength stat")
    dexterity: int = Field(default=0, ge=0, le=255, description="Dexterity stat")
    vitality: int = Field(default=0, ge=0, le=255, description="Vitality stat")
    intelligence: int = Field(default=0, ge=0, le=255, description="Intelligence stat")
    wisdom: int = Field(default=0, ge=0, le=255, description="Wisdom stat")
    charisma: int = Field(default=0, ge=0, le=255, description="Charisma stat")
    luck: int = Field(default=0, ge=0, le=255, description="Luck stat")

    @computed_field
    @property
    def max_health(self) -> int:
        """Maximum health points; vitality 255 gives 3925, well inside 16 bits."""
        return max_health_for(self.vitality)

    def as_rows(self) -> list[tuple[str, int]]:
        """Short label and value for every stat, in display order."""
        return [
            ("STR", self.strength),
            ("DEX", self.dexterity),
            ("VIT", self.vitality),
            ("INT", self.intelligence),
            ("WIS", self.wisdom),
            ("CHA", self.charisma),
            ("LUCK", self.luck),
        ]


def max_health_for(vitality: int) -> int:
    """Maximum health for a vitality value."""
    return BASE_HEALTH + vitality * HEALTH_PER_VITALITY
