"""Static item catalog: id -> name, tier, category and slot."""

from math import isqrt

from death_mountain_renderer.models.items import Item, ItemCategory, ItemSlot, ItemView, Tier

MAX_ITEM_ID = 101
MAX_GREATNESS = 20
UNKNOWN_ITEM_NAME = "Unknown"

_N = ItemCategory.NECKLACE
_R = ItemCategory.RING
_MC = ItemCategory.MAGIC_OR_CLOTH
_BH = ItemCategory.BLADE_OR_HIDE
_BM = ItemCategory.BLUDGEON_OR_METAL

# Indexed by item id; entry 0 is the empty slot.
_CATALOG: tuple[tuple[str, Tier, ItemCategory, ItemSlot], ...] = (
    ("", Tier.NONE, ItemCategory.NONE, ItemSlot.NONE),
    # Necklaces (1-3)
    ("Pendant", Tier.T1, _N, ItemSlot.NECK),
    ("Necklace", Tier.T1, _N, ItemSlot.NECK),
    ("Amulet", Tier.T1, _N, ItemSlot.NECK),
    # Rings (4-8)
    ("Silver Ring", Tier.T2, _R, ItemSlot.RING),
    ("Bronze Ring", Tier.T3, _R, ItemSlot.RING),
    ("Platinum Ring", Tier.T1, _R, ItemSlot.RING),
    ("Titanium Ring", Tier.T1, _R, ItemSlot.RING),
    ("Gold Ring", Tier.T1, _R, ItemSlot.RING),
    # Magic weapons (9-16)
    ("Ghost Wand", Tier.T1, _MC, ItemSlot.WEAPON),
    ("Grave Wand", Tier.T2, _MC, ItemSlot.WEAPON),
    ("Bone Wand", Tier.T3, _MC, ItemSlot.WEAPON),
    ("Wand", Tier.T5, _MC, ItemSlot.WEAPON),
    ("Grimoire", Tier.T1, _MC, ItemSlot.WEAPON),
    ("Chronicle", Tier.T2, _MC, ItemSlot.WEAPON),
    ("Tome", Tier.T4, _MC, ItemSlot.WEAPON),
    ("Book", Tier.T5, _MC, ItemSlot.WEAPON),
    # Cloth armor (17-41)
    ("Divine Robe", Tier.T1, _MC, ItemSlot.CHEST),
    ("Silk Robe", Tier.T2, _MC, ItemSlot.CHEST),
    ("Linen Robe", Tier.T3, _MC, ItemSlot.CHEST),
    ("Robe", Tier.T4, _MC, ItemSlot.CHEST),
    ("Shirt", Tier.T5, _MC, ItemSlot.CHEST),
    ("Crown", Tier.T1, _MC, ItemSlot.HEAD),
    ("Divine Hood", Tier.T2, _MC, ItemSlot.HEAD),
    ("Silk Hood", Tier.T3, _MC, ItemSlot.HEAD),
    ("Linen Hood", Tier.T4, _MC, ItemSlot.HEAD),
    ("Hood", Tier.T5, _MC, ItemSlot.HEAD),
    ("Brightsilk Sash", Tier.T1, _MC, ItemSlot.WAIST),
    ("Silk Sash", Tier.T2, _MC, ItemSlot.WAIST),
    ("Wool Sash", Tier.T3, _MC, ItemSlot.WAIST),
    ("Linen Sash", Tier.T4, _MC, ItemSlot.WAIST),
    ("Sash", Tier.T5, _MC, ItemSlot.WAIST),
    ("Divine Slippers", Tier.T1, _MC, ItemSlot.FOOT),
    ("Silk Slippers", Tier.T2, _MC, ItemSlot.FOOT),
    ("Wool Shoes", Tier.T3, _MC, ItemSlot.FOOT),
    ("Linen Shoes", Tier.T4, _MC, ItemSlot.FOOT),
    ("Shoes", Tier.T5, _MC, ItemSlot.FOOT),
    ("Divine Gloves", Tier.T1, _MC, ItemSlot.HAND),
    ("Silk Gloves", Tier.T2, _MC, ItemSlot.HAND),
    ("Wool Gloves", Tier.T3, _MC, ItemSlot.HAND),
    ("Linen Gloves", Tier.T4, _MC, ItemSlot.HAND),
    ("Gloves", Tier.T5, _MC, ItemSlot.HAND),
    # Blade weapons (42-46)
    ("Katana", Tier.T1, _BH, ItemSlot.WEAPON),
    ("Falchion", Tier.T2, _BH, ItemSlot.WEAPON),
    ("Scimitar", Tier.T3, _BH, ItemSlot.WEAPON),
    ("Long Sword", Tier.T4, _BH, ItemSlot.WEAPON),
    ("Short Sword", Tier.T5, _BH, ItemSlot.WEAPON),
    # Hide armor (47-71)
    ("Demon Husk", Tier.T1, _BH, ItemSlot.CHEST),
    ("Dragonskin Armor", Tier.T2, _BH, ItemSlot.CHEST),
    ("Studded Leather Armor", Tier.T3, _BH, ItemSlot.CHEST),
    ("Hard Leather Armor", Tier.T4, _BH, ItemSlot.CHEST),
    ("Leather Armor", Tier.T5, _BH, ItemSlot.CHEST),
    ("Demon Crown", Tier.T1, _BH, ItemSlot.HEAD),
    ("Dragons Crown", Tier.T2, _BH, ItemSlot.HEAD),
    ("War Cap", Tier.T3, _BH, ItemSlot.HEAD),
    ("Leather Cap", Tier.T4, _BH, ItemSlot.HEAD),
    ("Cap", Tier.T5, _BH, ItemSlot.HEAD),
    ("Demonhide Belt", Tier.T1, _BH, ItemSlot.WAIST),
    ("Dragonskin Belt", Tier.T2, _BH, ItemSlot.WAIST),
    ("Studded Leather Belt", Tier.T3, _BH, ItemSlot.WAIST),
    ("Hard Leather Belt", Tier.T4, _BH, ItemSlot.WAIST),
    ("Leather Belt", Tier.T5, _BH, ItemSlot.WAIST),
    ("Demonhide Boots", Tier.T1, _BH, ItemSlot.FOOT),
    ("Dragonskin Boots", Tier.T2, _BH, ItemSlot.FOOT),
    ("Studded Leather Boots", Tier.T3, _BH, ItemSlot.FOOT),
    ("Hard Leather Boots", Tier.T4, _BH, ItemSlot.FOOT),
    ("Leather Boots", Tier.T5, _BH, ItemSlot.FOOT),
    ("Demons Hands", Tier.T1, _BH, ItemSlot.HAND),
    ("Dragonskin Gloves", Tier.T2, _BH, ItemSlot.HAND),
    ("Studded Leather Gloves", Tier.T3, _BH, ItemSlot.HAND),
    ("Hard Leather Gloves", Tier.T4, _BH, ItemSlot.HAND),
    ("Leather Gloves", Tier.T5, _BH, ItemSlot.HAND),
    # Bludgeon weapons (72-76)
    ("Warhammer", Tier.T1, _BM, ItemSlot.WEAPON),
    ("Quarterstaff", Tier.T2, _BM, ItemSlot.WEAPON),
    ("Maul", Tier.T3, _BM, ItemSlot.WEAPON),
    ("Mace", Tier.T4, _BM, ItemSlot.WEAPON),
    ("Club", Tier.T5, _BM, ItemSlot.WEAPON),
    # Metal armor (77-101)
    ("Holy Chestplate", Tier.T1, _BM, ItemSlot.CHEST),
    ("Ornate Chestplate", Tier.T2, _BM, ItemSlot.CHEST),
    ("Plate Mail", Tier.T3, _BM, ItemSlot.CHEST),
    ("Chain Mail", Tier.T4, _BM, ItemSlot.CHEST),
    ("Ring Mail", Tier.T5, _BM, ItemSlot.CHEST),
    ("Ancient Helm", Tier.T1, _BM, ItemSlot.HEAD),
    ("Ornate Helm", Tier.T2, _BM, ItemSlot.HEAD),
    ("Great Helm", Tier.T3, _BM, ItemSlot.HEAD),
    ("Full Helm", Tier.T4, _BM, ItemSlot.HEAD),
    ("Helm", Tier.T5, _BM, ItemSlot.HEAD),
    ("Ornate Belt", Tier.T1, _BM, ItemSlot.WAIST),
    ("War Belt", Tier.T2, _BM, ItemSlot.WAIST),
    ("Plated Belt", Tier.T3, _BM, ItemSlot.WAIST),
    ("Mesh Belt", Tier.T4, _BM, ItemSlot.WAIST),
    ("Heavy Belt", Tier.T5, _BM, ItemSlot.WAIST),
    ("Holy Greaves", Tier.T1, _BM, ItemSlot.FOOT),
    ("Ornate Greaves", Tier.T2, _BM, ItemSlot.FOOT),
    ("Greaves", Tier.T3, _BM, ItemSlot.FOOT),
    ("Chain Boots", Tier.T4, _BM, ItemSlot.FOOT),
    ("Heavy Boots", Tier.T5, _BM, ItemSlot.FOOT),
    ("Holy Gauntlets", Tier.T1, _BM, ItemSlot.HAND),
    ("Ornate Gauntlets", Tier.T2, _BM, ItemSlot.HAND),
    ("Gauntlets", Tier.T3, _BM, ItemSlot.HAND),
    ("Chain Gloves", Tier.T4, _BM, ItemSlot.HAND),
    ("Heavy Gloves", Tier.T5, _BM, ItemSlot.HAND),
)


class ItemCatalog:
    """Read-only lookup of the 101 catalog items."""

    @staticmethod
    def resolve(item_id: int, xp: int = 0, placeholder: str = UNKNOWN_ITEM_NAME) -> ItemView:
        """
        Resolve an item id to its catalog view.

        Args:
            item_id: Item id (0 = empty, 1-101 catalog, anything above is unknown)
            xp: Item experience, used for greatness
            placeholder: Name used for ids outside the catalog

        Returns:
            ItemView; never raises for out-of-table ids
        """
        if 0 <= item_id <= MAX_ITEM_ID:
            name, tier, category, slot = _CATALOG[item_id]
        else:
            name, tier, category, slot = placeholder, Tier.NONE, ItemCategory.NONE, ItemSlot.NONE

        return ItemView(
            id=item_id,
            xp=xp,
            name=name,
            tier=tier,
            category=category,
            slot=slot,
            greatness=0 if item_id == 0 else calculate_greatness(xp),
        )

    @staticmethod
    def resolve_item(item: Item) -> ItemView:
        """Resolve a raw item, carrying its experience through."""
        return ItemCatalog.resolve(item.id, item.xp)

    @staticmethod
    def item_name(item_id: int) -> str:
        """Display name for an item id."""
        return ItemCatalog.resolve(item_id).name

    @staticmethod
    def item_ids() -> range:
        """All catalog ids."""
        return range(1, MAX_ITEM_ID + 1)


def calculate_greatness(xp: int) -> int:
    """
    Greatness level for an item's experience.

    Grows with the integer square root of xp, so levelling slows down as
    experience accumulates, and is capped at MAX_GREATNESS. New items start
    at greatness 1.
    """
    if xp <= 0:
        return 1
    return max(1, min(isqrt(xp), MAX_GREATNESS))
