"""SVG template engine for adventurer cards."""

from enum import Enum
from typing import Optional

from death_mountain_renderer.engine.item_catalog import ItemCatalog
from death_mountain_renderer.engine.text_layout import TextLayout
from death_mountain_renderer.engine.theme import ICON_VIEWBOX, Theme, ThemeTable
from death_mountain_renderer.models.adventurer import AdventurerSnapshot
from death_mountain_renderer.models.items import Bag, Equipment, ItemSlot, ItemView
from death_mountain_renderer.models.stats import Stats

CANVAS_WIDTH = 862
CANVAS_HEIGHT = 1270
MARGIN = 40
CONTENT_WIDTH = CANVAS_WIDTH - 2 * MARGIN
CENTER_X = CANVAS_WIDTH // 2

FONT_FAMILY = "VT323, Courier New, monospace"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Thresholds in whole percent of max health
HEALTH_WARNED_PERCENT = 50
HEALTH_HEALTHY_PERCENT = 70


class HealthState(str, Enum):
    """Color band of the health bar."""

    CRITICAL = "critical"
    WARNED = "warned"
    HEALTHY = "healthy"


HEALTH_COLORS = {
    HealthState.CRITICAL: "#FF3B30",
    HealthState.WARNED: "#FFC107",
    HealthState.HEALTHY: "#2ECC40",
}

# Slot grid geometry
EQUIPMENT_COLUMNS = 2
EQUIPMENT_SLOT_WIDTH = 386
EQUIPMENT_GAP = 10
BAG_COLUMNS = 3
BAG_SLOT_WIDTH = 254
BAG_SLOT_HEIGHT = 190
BAG_GAP = 10
ICON_SCALE = 2


class TemplateEngine:
    """Builds SVG fragments from adventurer data; every method is pure."""

    # -- primitives -------------------------------------------------------

    @staticmethod
    def text(
        x: int,
        y: int,
        content: str,
        size: int,
        color: str,
        anchor: Optional[str] = None,
        weight: Optional[str] = None,
    ) -> str:
        """A text node; content must already be escaped."""
        attributes = f'x="{x}" y="{y}" font-size="{size}" fill="{color}"'
        if anchor:
            attributes += f' text-anchor="{anchor}"'
        if weight:
            attributes += f' font-weight="{weight}"'
        return f"<text {attributes}>{content}</text>"

    @staticmethod
    def rect(
        x: int,
        y: int,
        width: int,
        height: int,
        fill: str = "none",
        stroke: Optional[str] = None,
        radius: int = 0,
    ) -> str:
        """A rectangle; stroke is drawn 2px wide when given."""
        attributes = f'x="{x}" y="{y}" width="{width}" height="{height}"'
        if radius:
            attributes += f' rx="{radius}"'
        attributes += f' fill="{fill}"'
        if stroke:
            attributes += f' stroke="{stroke}" stroke-width="2"'
        return f"<rect {attributes}/>"

    @staticmethod
    def icon(path: str, x: int, y: int, color: str, scale: int = ICON_SCALE) -> str:
        """A 24x24 icon path placed at (x, y)."""
        return (
            f'<path transform="translate({x} {y}) scale({scale})" '
            f'd="{path}" fill="{color}" fill-rule="evenodd"/>'
        )

    @staticmethod
    def frame(theme: Theme) -> str:
        """Page background with its decorative border."""
        return TemplateEngine.rect(0, 0, CANVAS_WIDTH, CANVAS_HEIGHT, fill=theme.background) + (
            f'<rect x="10" y="10" width="{CANVAS_WIDTH - 20}" height="{CANVAS_HEIGHT - 20}" '
            f'rx="16" fill="none" stroke="{theme.border}" stroke-width="4"/>'
        )

    # -- health -----------------------------------------------------------

    @staticmethod
    def health_percent(health: int, max_health: int) -> int:
        """Whole percent of max health, floored; 0 when max_health is 0."""
        if max_health == 0:
            return 0
        return health * 100 // max_health

    @staticmethod
    def health_state(health: int, max_health: int) -> HealthState:
        """
        Color band for the health bar.

        Below 50% is critical, 50-69% is warned (50% exactly is warned),
        70% and above is healthy. Zero health is always critical.
        """
        if health == 0:
            return HealthState.CRITICAL
        percent = TemplateEngine.health_percent(health, max_health)
        if percent < HEALTH_WARNED_PERCENT:
            return HealthState.CRITICAL
        if percent < HEALTH_HEALTHY_PERCENT:
            return HealthState.WARNED
        return HealthState.HEALTHY

    @staticmethod
    def health_bar(
        health: int,
        max_health: int,
        theme: Theme,
        x: int = MARGIN,
        y: int = 210,
        width: int = CONTENT_WIDTH,
        label: str = "HEALTH",
    ) -> str:
        """
        Labelled health bar with its 'current/max' fraction.

        Args:
            health: Current health
            max_health: Maximum health
            theme: Page theme for label and outline
            x: Left edge
            y: Top of the label line
            width: Bar width in pixels
            label: Text shown above the bar

        Returns:
            SVG fragment
        """
        state = TemplateEngine.health_state(health, max_health)
        color = HEALTH_COLORS[state]
        percent = min(TemplateEngine.health_percent(health, max_health), 100)
        fill_width = width * percent // 100
        bar_y = y + 12

        return (
            '<g class="health">'
            + TemplateEngine.text(x, y, label, 16, theme.primary)
            + TemplateEngine.text(
                x + width, y, TextLayout.fraction(health, max_health), 16, color, anchor="end"
            )
            + TemplateEngine.rect(x, bar_y, width, 24, stroke=theme.border, radius=4)
            + f'<rect x="{x}" y="{bar_y}" width="{fill_width}" height="24" rx="4" '
            f'fill="{color}" data-health="{state.value}"/>'
            + "</g>"
        )

    # -- counters ---------------------------------------------------------

    @staticmethod
    def labelled_value(
        label: str, value: int, theme: Theme, x: int, y: int, width: int = 180, height: int = 60
    ) -> str:
        """Boxed counter with a fixed label, shown even when the value is 0."""
        return (
            TemplateEngine.rect(x, y, width, height, stroke=theme.border, radius=6)
            + TemplateEngine.text(x + 16, y + 24, label, 14, theme.primary)
            + TemplateEngine.text(x + 16, y + height - 12, TextLayout.number(value), 22, theme.primary)
        )

    @staticmethod
    def level_badge(level: int, theme: Theme, x: int = MARGIN, y: int = 120) -> str:
        """Level counter."""
        return TemplateEngine.labelled_value("LEVEL", level, theme, x, y)

    @staticmethod
    def gold_display(gold: int, theme: Theme, x: int = CANVAS_WIDTH - MARGIN - 180, y: int = 120) -> str:
        """Gold counter."""
        return TemplateEngine.labelled_value("GOLD", gold, theme, x, y)

    @staticmethod
    def stat_rows(stats: Stats, theme: Theme, x: int = MARGIN, y: int = 280) -> str:
        """The seven stats as a row of labelled cells."""
        cells = []
        for index, (label, value) in enumerate(stats.as_rows()):
            cell_x = x + index * 112
            cells.append(
                TemplateEngine.rect(cell_x, y, 106, 70, stroke=theme.border, radius=6)
                + TemplateEngine.text(cell_x + 53, y + 26, label, 14, theme.primary, anchor="middle")
                + TemplateEngine.text(
                    cell_x + 53, y + 56, TextLayout.number(value), 24, theme.primary, anchor="middle"
                )
            )
        return '<g class="stats">' + "".join(cells) + "</g>"

    # -- name -------------------------------------------------------------

    @staticmethod
    def name_text(name: str, theme: Theme, x: int = CENTER_X, y: int = 90) -> str:
        """Adventurer name, sized by length and truncated past 30 characters."""
        size = TextLayout.name_font_size(name)
        content = TextLayout.escape_xml(TextLayout.display_name(name))
        return TemplateEngine.text(x, y, content, size, theme.primary, anchor="middle", weight="bold")

    # -- items ------------------------------------------------------------

    @staticmethod
    def item_slot(
        view: ItemView,
        slot: ItemSlot,
        theme: Theme,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> str:
        """
        One item box: frame and slot icon always, then tier, greatness and
        the wrapped name when the slot holds an item.
        """
        parts = [
            TemplateEngine.rect(x, y, width, height, stroke=theme.border, radius=8),
            TemplateEngine.icon(ThemeTable.icon_for(slot), x + 20, y + 20, theme.primary),
        ]
        label_x = x + 20 + ICON_VIEWBOX * ICON_SCALE + 12
        if slot != ItemSlot.NONE:
            parts.append(TemplateEngine.text(label_x, y + 40, slot.value.upper(), 14, theme.border))

        if not view.is_empty:
            if view.is_known:
                parts.append(
                    TemplateEngine.text(x + width - 20, y + 40, view.tier.value, 16, theme.primary, anchor="end")
                )
            parts.append(
                TemplateEngine.text(
                    x + width - 20, y + height - 16, f"G{view.greatness}", 16, theme.primary, anchor="end"
                )
            )
            for line_index, line in enumerate(TextLayout.wrap_words(view.name)):
                parts.append(
                    TemplateEngine.text(
                        x + 20, y + 110 + line_index * 30, TextLayout.escape_xml(line), 22, theme.primary
                    )
                )

        return '<g class="slot">' + "".join(parts) + "</g>"

    @staticmethod
    def equipment_grid(
        equipment: Equipment,
        theme: Theme,
        x: int = MARGIN,
        y: int = 380,
        slot_height: int = 200,
    ) -> str:
        """The eight equipment slots, two per row."""
        boxes = []
        for index, (slot, item) in enumerate(equipment.slots()):
            row, column = divmod(index, EQUIPMENT_COLUMNS)
            boxes.append(
                TemplateEngine.item_slot(
                    ItemCatalog.resolve_item(item),
                    slot,
                    theme,
                    x + column * (EQUIPMENT_SLOT_WIDTH + EQUIPMENT_GAP),
                    y + row * (slot_height + EQUIPMENT_GAP),
                    EQUIPMENT_SLOT_WIDTH,
                    slot_height,
                )
            )
        return '<g class="equipment">' + "".join(boxes) + "</g>"

    @staticmethod
    def bag_grid(bag: Bag, theme: Theme, x: int = MARGIN, y: int = 230) -> str:
        """The fifteen bag slots, three per row."""
        boxes = []
        for index, item in enumerate(bag.items):
            row, column = divmod(index, BAG_COLUMNS)
            view = ItemCatalog.resolve_item(item)
            boxes.append(
                TemplateEngine.item_slot(
                    view,
                    view.slot,
                    theme,
                    x + column * (BAG_SLOT_WIDTH + BAG_GAP),
                    y + row * (BAG_SLOT_HEIGHT + BAG_GAP),
                    BAG_SLOT_WIDTH,
                    BAG_SLOT_HEIGHT,
                )
            )
        return '<g class="bag">' + "".join(boxes) + "</g>"

    # -- pages ------------------------------------------------------------

    @staticmethod
    def inventory_page(snapshot: AdventurerSnapshot, theme: Theme) -> str:
        """Name, counters, health, stats and equipped items."""
        return (
            TemplateEngine.frame(theme)
            + TemplateEngine.name_text(snapshot.name, theme)
            + TemplateEngine.level_badge(snapshot.level, theme)
            + TemplateEngine.gold_display(snapshot.gold, theme)
            + TemplateEngine.health_bar(snapshot.health, snapshot.max_health, theme)
            + TemplateEngine.stat_rows(snapshot.stats, theme)
            + TemplateEngine.equipment_grid(snapshot.equipment, theme)
        )

    @staticmethod
    def item_bag_page(snapshot: AdventurerSnapshot, theme: Theme) -> str:
        """Name, gold and the bag contents."""
        count = TextLayout.fraction(snapshot.bag.item_count, len(snapshot.bag.items))
        return (
            TemplateEngine.frame(theme)
            + TemplateEngine.name_text(snapshot.name, theme)
            + TemplateEngine.text(MARGIN, 170, "ITEM BAG", 28, theme.primary, weight="bold")
            + TemplateEngine.text(CENTER_X, 170, f"GOLD {TextLayout.number(snapshot.gold)}", 20, theme.primary, anchor="middle")
            + TemplateEngine.text(CANVAS_WIDTH - MARGIN, 170, count, 20, theme.primary, anchor="end")
            + TemplateEngine.bag_grid(snapshot.bag, theme)
        )

    @staticmethod
    def battle_page(snapshot: AdventurerSnapshot, theme: Theme) -> str:
        """Battle status, both health values, level, stats and equipment."""
        heading = "DEFEATED" if snapshot.is_dead else "IN BATTLE"
        half_width = (CONTENT_WIDTH - 20) // 2
        return (
            TemplateEngine.frame(theme)
            + TemplateEngine.name_text(snapshot.name, theme)
            + TemplateEngine.text(CENTER_X, 150, heading, 32, theme.primary, anchor="middle", weight="bold")
            + TemplateEngine.health_bar(snapshot.health, snapshot.max_health, theme, y=190)
            + TemplateEngine.labelled_value("BEAST HEALTH", snapshot.beast_health, theme, MARGIN, 250, half_width, 80)
            + TemplateEngine.labelled_value("LEVEL", snapshot.level, theme, MARGIN + half_width + 20, 250, half_width, 80)
            + TemplateEngine.stat_rows(snapshot.stats, theme, y=350)
            + TemplateEngine.equipment_grid(snapshot.equipment, theme, y=450, slot_height=180)
        )

    @staticmethod
    def journey_page(snapshot: AdventurerSnapshot, theme: Theme) -> str:
        """Progress counters, including the display-only seed and action counter."""
        rows = [
            ("LEVEL", snapshot.level),
            ("XP", snapshot.xp),
            ("GOLD", snapshot.gold),
            ("STAT UPGRADES", snapshot.stat_upgrades_available),
            ("ACTIONS", snapshot.action_count),
            ("ITEM SEED", snapshot.item_specials_seed),
        ]
        half_width = (CONTENT_WIDTH - 20) // 2
        boxes = []
        for index, (label, value) in enumerate(rows):
            row, column = divmod(index, 2)
            boxes.append(
                TemplateEngine.labelled_value(
                    label, value, theme, MARGIN + column * (half_width + 20), 140 + row * 100, half_width, 80
                )
            )
        return (
            TemplateEngine.frame(theme)
            + TemplateEngine.name_text(snapshot.name, theme)
            + "".join(boxes)
            + TemplateEngine.health_bar(snapshot.health, snapshot.max_health, theme, y=470)
            + TemplateEngine.stat_rows(snapshot.stats, theme, y=540)
        )

    # -- documents --------------------------------------------------------

    @staticmethod
    def document(body: str, style: str = "") -> str:
        """Wrap page content in the root svg element."""
        head = (
            f'<svg xmlns="{SVG_NAMESPACE}" width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" '
            f'viewBox="0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}" font-family="{FONT_FAMILY}">'
        )
        if style:
            head += f"<style>{style}</style>"
        return head + body + "</svg>"

    @staticmethod
    def static_document(page: str) -> str:
        """Single page with no animation, fully opaque."""
        return TemplateEngine.document(f'<g class="page" opacity="1">{page}</g>')

    @staticmethod
    def animated_document(pages: list[str], offsets: list[int], keyframes: list[tuple[str, int]], cycle_seconds: int) -> str:
        """
        Horizontal strip of pages slid by a CSS keyframe animation.

        Args:
            pages: Page bodies in strip order (the first page repeated last)
            offsets: Horizontal offset of each page container
            keyframes: (percentage, strip offset) pairs, strip moves left
            cycle_seconds: Length of one full cycle

        Returns:
            Complete SVG document
        """
        frames = "".join(
            f"{percent}{{transform:translateX({-offset}px)}}" for percent, offset in keyframes
        )
        style = (
            f"@keyframes pages{{{frames}}}"
            f".strip{{animation:pages {cycle_seconds}s linear infinite}}"
        )
        groups = "".join(
            f'<g class="page" transform="translate({offset} 0)">{page}</g>'
            for page, offset in zip(pages, offsets)
        )
        return TemplateEngine.document(f'<g class="strip">{groups}</g>', style=style)
