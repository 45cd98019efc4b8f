"""Page and battle state machine."""

import logging
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from death_mountain_renderer.engine.template_engine import CANVAS_WIDTH
from death_mountain_renderer.engine.text_layout import TextLayout
from death_mountain_renderer.models.adventurer import AdventurerSnapshot

logger = logging.getLogger(__name__)


class PageType(int, Enum):
    """Page kinds; the value doubles as the theme palette index."""

    INVENTORY = 0
    ITEM_BAG = 1
    BATTLE = 2
    JOURNEY = 3

    @classmethod
    def from_name(cls, name: str) -> "PageType":
        """Look a page type up by its lowercase name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown page type: {name}") from None


class AdventurerState(str, Enum):
    """Condition of the adventurer that decides the page mode."""

    DEAD = "dead"
    IN_COMBAT = "in_combat"
    NORMAL = "normal"


class NormalMode(BaseModel):
    """Multi-page cycle shown outside of battle."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    kind: Literal["normal"] = "normal"
    pages: tuple[PageType, ...] = Field(min_length=1, description="Pages in cycle order")

    @property
    def page_count(self) -> int:
        return len(self.pages)


class BattleOnlyMode(BaseModel):
    """Single static battle page, used in combat and after death."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    kind: Literal["battle_only"] = "battle_only"
    state: AdventurerState = Field(description="Why the battle page is shown")

    @property
    def pages(self) -> tuple[PageType, ...]:
        return (PageType.BATTLE,)

    @property
    def page_count(self) -> int:
        return 1


PageMode = Union[NormalMode, BattleOnlyMode]


class Keyframe(BaseModel):
    """Position of the page strip at one point of the cycle."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    at_seconds: int = Field(ge=0, description="Time since cycle start")
    offset: int = Field(ge=0, description="How far the strip has moved left, in pixels")


class AnimationTiming(BaseModel):
    """Timing and positions of a page cycle."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    page_count: int = Field(ge=1)
    display_seconds: int = Field(ge=1)
    transition_seconds: int = Field(ge=1)
    page_width: int = Field(ge=1)
    keyframes: tuple[Keyframe, ...] = Field(default=())

    @property
    def cycle_seconds(self) -> int:
        """Full cycle: every page shown once plus its transition."""
        return self.page_count * (self.display_seconds + self.transition_seconds)

    def page_offset(self, page_index: int) -> int:
        """Horizontal offset of a page container in the strip."""
        return page_index * self.page_width

    def css_keyframes(self) -> list[tuple[str, int]]:
        """Keyframes as (percentage text, offset) pairs."""
        return [
            (TextLayout.percent(frame.at_seconds, self.cycle_seconds), frame.offset)
            for frame in self.keyframes
        ]


class PageStateMachine:
    """Derives page mode and animation from a snapshot; holds no state between calls."""

    def __init__(
        self,
        normal_pages: tuple[PageType, ...] = (PageType.INVENTORY, PageType.ITEM_BAG),
        display_seconds: int = 4,
        transition_seconds: int = 1,
        page_width: int = CANVAS_WIDTH,
    ) -> None:
        """
        Initialize the state machine.

        Args:
            normal_pages: Pages cycled outside of battle
            display_seconds: Time each page stays still
            transition_seconds: Time spent sliding to the next page
            page_width: Width of one page container
        """
        if not normal_pages:
            raise ValueError("At least one normal page is required")
        self.normal_pages = tuple(normal_pages)
        self.display_seconds = display_seconds
        self.transition_seconds = transition_seconds
        self.page_width = page_width

    @staticmethod
    def adventurer_state(snapshot: AdventurerSnapshot) -> AdventurerState:
        """Dead beats in combat beats normal."""
        if snapshot.health == 0:
            return AdventurerState.DEAD
        if snapshot.beast_health > 0:
            return AdventurerState.IN_COMBAT
        return AdventurerState.NORMAL

    def page_mode(self, snapshot: AdventurerSnapshot) -> PageMode:
        """Page mode for a snapshot, computed fresh on every call."""
        state = self.adventurer_state(snapshot)
        if state is AdventurerState.NORMAL:
            mode: PageMode = NormalMode(pages=self.normal_pages)
        else:
            mode = BattleOnlyMode(state=state)
        logger.debug(f"Adventurer state {state.value} -> {mode.kind} with {mode.page_count} page(s)")
        return mode

    def page_count(self, snapshot: AdventurerSnapshot) -> int:
        """Number of pages available for a snapshot."""
        return self.page_mode(snapshot).page_count

    def page_type_at(self, snapshot: AdventurerSnapshot, page_index: int) -> PageType:
        """
        Page shown at an index of the current mode.

        Raises:
            ValueError: If the index is outside the mode's pages
        """
        mode = self.page_mode(snapshot)
        if not 0 <= page_index < mode.page_count:
            raise ValueError(
                f"Page index {page_index} out of range for {mode.kind} mode with {mode.page_count} page(s)"
            )
        return mode.pages[page_index]

    def animation_timing(self, page_count: int) -> AnimationTiming:
        """
        Keyframes for a cycle of any number of pages.

        Page i rests at offset i * page_width for display_seconds, then slides
        to the next page during transition_seconds. The last page slides onto
        a copy of the first one placed at page_count * page_width, so the loop
        restarts without a jump.
        """
        if page_count < 1:
            raise ValueError(f"Page count must be positive, got {page_count}")

        step = self.display_seconds + self.transition_seconds
        keyframes = []
        for index in range(page_count):
            start = index * step
            keyframes.append(Keyframe(at_seconds=start, offset=index * self.page_width))
            keyframes.append(Keyframe(at_seconds=start + self.display_seconds, offset=index * self.page_width))
        keyframes.append(Keyframe(at_seconds=page_count * step, offset=page_count * self.page_width))

        return AnimationTiming(
            page_count=page_count,
            display_seconds=self.display_seconds,
            transition_seconds=self.transition_seconds,
            page_width=self.page_width,
            keyframes=tuple(keyframes),
        )
