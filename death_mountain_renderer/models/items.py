"""Item, equipment and bag models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

BAG_SIZE = 15


class Tier(str, Enum):
    """Item rarity; T1 is the best tier and T5 the worst."""

    NONE = "None"
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"
    T4 = "T4"
    T5 = "T5"


class ItemCategory(str, Enum):
    """Item type; weapons and armor share a category per material family."""

    NONE = "None"
    MAGIC_OR_CLOTH = "Magic/Cloth"
    BLADE_OR_HIDE = "Blade/Hide"
    BLUDGEON_OR_METAL = "Bludgeon/Metal"
    NECKLACE = "Necklace"
    RING = "Ring"


class ItemSlot(str, Enum):
    """Equipment slot an item is worn in."""

    NONE = "None"
    WEAPON = "Weapon"
    CHEST = "Chest"
    HEAD = "Head"
    WAIST = "Waist"
    FOOT = "Foot"
    HAND = "Hand"
    NECK = "Neck"
    RING = "Ring"


class Item(BaseModel):
    """Raw item as carried by an adventurer."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: int = Field(default=0, ge=0, le=255, description="Item id (0 = empty, 1-101 catalog, >101 unknown)")
    xp: int = Field(default=0, ge=0, le=65535, description="Item experience counter")

    @property
    def is_empty(self) -> bool:
        """Whether the slot holding this item is empty."""
        return self.id == 0


class ItemView(BaseModel):
    """Item resolved against the item catalog."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    id: int = Field(ge=0, le=255, description="Item id")
    xp: int = Field(default=0, ge=0, le=65535, description="Item experience counter")
    name: str = Field(default="", description="Display name")
    tier: Tier = Field(default=Tier.NONE, description="Item tier")
    category: ItemCategory = Field(default=ItemCategory.NONE, description="Item category")
    slot: ItemSlot = Field(default=ItemSlot.NONE, description="Equipment slot")
    greatness: int = Field(default=0, ge=0, description="Display level derived from xp")

    @property
    def is_empty(self) -> bool:
        """Whether this view stands for an empty slot."""
        return self.id == 0

    @property
    def is_known(self) -> bool:
        """Whether the id is a catalog entry."""
        return self.tier != Tier.NONE


class Equipment(BaseModel):
    """The eight equipped item slots."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    weapon: Item = Field(default_factory=Item, description="Weapon slot")
    chest: Item = Field(default_factory=Item, description="Chest armor slot")
    head: Item = Field(default_factory=Item, description="Head armor slot")
    waist: Item = Field(default_factory=Item, description="Waist armor slot")
    foot: Item = Field(default_factory=Item, description="Foot armor slot")
    hand: Item = Field(default_factory=Item, description="Hand armor slot")
    neck: Item = Field(default_factory=Item, description="Necklace slot")
    ring: Item = Field(default_factory=Item, description="Ring slot")

    def slots(self) -> list[tuple[ItemSlot, Item]]:
        """Every slot with its item, in display order."""
        return [
            (ItemSlot.WEAPON, self.weapon),
            (ItemSlot.CHEST, self.chest),
            (ItemSlot.HEAD, self.head),
            (ItemSlot.WAIST, self.waist),
            (ItemSlot.FOOT, self.foot),
            (ItemSlot.HAND, self.hand),
            (ItemSlot.NECK, self.neck),
            (ItemSlot.RING, self.ring),
        ]


class Bag(BaseModel):
    """Inventory bag with exactly fifteen slots."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    items: list[Item] = Field(
        default_factory=lambda: [Item() for _ in range(BAG_SIZE)],
        min_length=BAG_SIZE,
        max_length=BAG_SIZE,
        description="Bag slots (id 0 for empty slots)",
    )

    @field_validator("items", mode="before")
    @classmethod
    def pad_to_bag_size(cls, value: Any) -> Any:
        """Fill missing trailing slots with empty items."""
        if isinstance(value, (list, tuple)) and len(value) < BAG_SIZE:
            return list(value) + [Item() for _ in range(BAG_SIZE - len(value))]
        return value

    @property
    def item_count(self) -> int:
        """Number of non-empty slots."""
        return sum(1 for item in self.items if not item.is_empty)
