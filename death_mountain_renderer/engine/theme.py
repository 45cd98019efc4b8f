"""Page color palettes and equipment slot icons."""

from pydantic import BaseModel, ConfigDict, Field

from death_mountain_renderer.models.items import ItemSlot


class Theme(BaseModel):
    """Colors of one page."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    primary: str = Field(description="Text and icon color")
    background: str = Field(description="Canvas fill")
    border: str = Field(description="Frame and slot outline color")


# Indexed by page type value: inventory, item bag, battle, journey
_PALETTE: tuple[Theme, ...] = (
    Theme(primary="#78E846", background="#000000", border="#2C5F1A"),
    Theme(primary="#E89446", background="#000000", border="#6B4320"),
    Theme(primary="#FF6B6B", background="#0A0000", border="#7A2E2E"),
    Theme(primary="#4DA6FF", background="#00040A", border="#1F4A75"),
)

# 24x24 icon outlines, absolute coordinates only
ICON_VIEWBOX = 24

SLOT_ICONS: dict[ItemSlot, str] = {
    ItemSlot.WEAPON: "M20 2L22 4L10 16L12 18L10 20L8 18L4 22L2 20L6 16L4 14L6 12L8 14Z",
    ItemSlot.CHEST: "M6 3L9 3L12 5L15 3L18 3L22 7L19 10L18 9L18 21L6 21L6 9L5 10L2 7Z",
    ItemSlot.HEAD: "M12 2C6 2 3 6 3 11L3 20L9 20L9 13L15 13L15 20L21 20L21 11C21 6 18 2 12 2Z",
    ItemSlot.WAIST: "M2 9L10 9L10 8L14 8L14 9L22 9L22 15L14 15L14 16L10 16L10 15L2 15Z",
    ItemSlot.FOOT: "M7 2L13 2L13 13L21 16L21 21L4 21L4 17L7 13Z",
    ItemSlot.HAND: (
        "M6 10L6 4L8 4L8 9L9 9L9 2L11 2L11 9L12 9L12 3L14 3L14 9L15 9L15 5L17 5"
        "L17 15L14 21L8 21L5 15L3 11L4 9Z"
    ),
    ItemSlot.NECK: (
        "M4 3L6 3C6 9 9 12 12 12C15 12 18 9 18 3L20 3C20 10 16 14 13 14L13 16"
        "L15 19L12 22L9 19L11 16L11 14C8 14 4 10 4 3Z"
    ),
    ItemSlot.RING: (
        "M12 6C16 6 19 9 19 13C19 17 16 20 12 20C8 20 5 17 5 13C5 9 8 6 12 6Z"
        "M12 8C9 8 7 10 7 13C7 16 9 18 12 18C15 18 17 16 17 13C17 10 15 8 12 8Z"
        "M10 2L14 2L15 5L9 5Z"
    ),
}

# Bag items outside the catalog have no slot
UNKNOWN_ICON = "M5 3L19 3L21 5L21 19L19 21L5 21L3 19L3 5Z"


class ThemeTable:
    """Read-only palette and icon lookup."""

    @staticmethod
    def theme_for(page_index: int) -> Theme:
        """Theme for a page index; unknown indices use the first palette entry."""
        if 0 <= page_index < len(_PALETTE):
            return _PALETTE[page_index]
        return _PALETTE[0]

    @staticmethod
    def icon_for(slot: ItemSlot) -> str:
        """Icon path for a slot."""
        return SLOT_ICONS.get(slot, UNKNOWN_ICON)

    @staticmethod
    def palette_size() -> int:
        """Number of palette entries."""
        return len(_PALETTE)
