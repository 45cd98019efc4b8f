"""Tests for PageStateMachine."""

import pytest

from death_mountain_renderer.engine.page_state import (
    AdventurerState,
    BattleOnlyMode,
    NormalMode,
    PageStateMachine,
    PageType,
)
from death_mountain_renderer.engine.template_engine import CANVAS_WIDTH


class TestAdventurerState:
    """Test suite for state classification."""

    def test_normal(self, sample_adventurer):
        """Test a living adventurer without a beast is exploring."""
        assert PageStateMachine.adventurer_state(sample_adventurer) == AdventurerState.NORMAL

    def test_in_combat(self, battle_adventurer):
        """Test a living adventurer facing a beast is in combat."""
        assert PageStateMachine.adventurer_state(battle_adventurer) == AdventurerState.IN_COMBAT

    def test_dead_beats_combat(self, sample_adventurer):
        """Test zero health is dead even with a beast present."""
        snapshot = sample_adventurer.model_copy(update={"health": 0, "beast_health": 50})
        assert PageStateMachine.adventurer_state(snapshot) == AdventurerState.DEAD


class TestPageMode:
    """Test suite for page mode selection."""

    def test_default_normal_mode_has_two_pages(self, sample_adventurer):
        """Test the default cycle is inventory then item bag."""
        mode = PageStateMachine().page_mode(sample_adventurer)
        assert isinstance(mode, NormalMode)
        assert mode.pages == (PageType.INVENTORY, PageType.ITEM_BAG)
        assert mode.page_count == 2

    def test_battle_only_in_combat(self, battle_adventurer):
        """Test combat forces the single battle page."""
        mode = PageStateMachine().page_mode(battle_adventurer)
        assert isinstance(mode, BattleOnlyMode)
        assert mode.state == AdventurerState.IN_COMBAT
        assert mode.pages == (PageType.BATTLE,)
        assert mode.page_count == 1

    def test_battle_only_when_dead(self, dead_adventurer):
        """Test death forces the single battle page."""
        mode = PageStateMachine().page_mode(dead_adventurer)
        assert isinstance(mode, BattleOnlyMode)
        assert mode.state == AdventurerState.DEAD

    def test_mode_follows_snapshot(self, sample_adventurer, battle_adventurer):
        """Test nothing is remembered between calls."""
        machine = PageStateMachine()
        assert machine.page_mode(battle_adventurer).kind == "battle_only"
        assert machine.page_mode(sample_adventurer).kind == "normal"
        assert machine.page_mode(battle_adventurer).kind == "battle_only"

    def test_configured_pages(self, sample_adventurer):
        """Test a three page cycle."""
        machine = PageStateMachine(normal_pages=(PageType.INVENTORY, PageType.ITEM_BAG, PageType.JOURNEY))
        assert machine.page_count(sample_adventurer) == 3

    def test_no_pages_rejected(self):
        """Test an empty normal cycle is refused."""
        with pytest.raises(ValueError):
            PageStateMachine(normal_pages=())


class TestPageTypeAt:
    """Test suite for page index lookup."""

    def test_indices_in_normal_mode(self, sample_adventurer):
        """Test each index maps to its page."""
        machine = PageStateMachine()
        assert machine.page_type_at(sample_adventurer, 0) == PageType.INVENTORY
        assert machine.page_type_at(sample_adventurer, 1) == PageType.ITEM_BAG

    @pytest.mark.parametrize("page_index", [-1, 2, 10])
    def test_out_of_range_in_normal_mode(self, sample_adventurer, page_index):
        """Test invalid indices raise."""
        with pytest.raises(ValueError):
            PageStateMachine().page_type_at(sample_adventurer, page_index)

    def test_battle_mode_only_index_zero(self, battle_adventurer):
        """Test index 1 is invalid while in combat."""
        machine = PageStateMachine()
        assert machine.page_type_at(battle_adventurer, 0) == PageType.BATTLE
        with pytest.raises(ValueError):
            machine.page_type_at(battle_adventurer, 1)


class TestPageTypeNames:
    """Test suite for page name lookup."""

    def test_from_name(self):
        """Test names are case and whitespace insensitive."""
        assert PageType.from_name("inventory") == PageType.INVENTORY
        assert PageType.from_name(" Item_Bag ") == PageType.ITEM_BAG

    def test_unknown_name(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            PageType.from_name("map")


class TestAnimationTiming:
    """Test suite for keyframe generation."""

    def test_two_page_cycle(self):
        """Test the default 4s display plus 1s slide per page."""
        timing = PageStateMachine().animation_timing(2)
        assert timing.cycle_seconds == 10
        assert timing.css_keyframes() == [
            ("0%", 0),
            ("40%", 0),
            ("50%", CANVAS_WIDTH),
            ("90%", CANVAS_WIDTH),
            ("100%", 2 * CANVAS_WIDTH),
        ]

    def test_three_page_cycle(self):
        """Test fractional percentages are floored to two decimals."""
        timing = PageStateMachine().animation_timing(3)
        assert timing.cycle_seconds == 15
        assert [percent for percent, _ in timing.css_keyframes()] == [
            "0%",
            "26.66%",
            "33.33%",
            "60%",
            "66.66%",
            "93.33%",
            "100%",
        ]

    @pytest.mark.parametrize("page_count", [1, 2, 3, 4, 7])
    def test_cycle_shape(self, page_count):
        """Test every cycle starts at 0, ends on the copied first page and never moves back."""
        timing = PageStateMachine(display_seconds=3, transition_seconds=2).animation_timing(page_count)
        frames = timing.keyframes
        assert len(frames) == 2 * page_count + 1
        assert frames[0].at_seconds == 0 and frames[0].offset == 0
        assert frames[-1].at_seconds == timing.cycle_seconds == page_count * 5
        assert frames[-1].offset == page_count * CANVAS_WIDTH
        for earlier, later in zip(frames, frames[1:]):
            assert later.at_seconds > earlier.at_seconds
            assert later.offset >= earlier.offset

    def test_page_offsets(self):
        """Test page containers are laid out one canvas width apart."""
        timing = PageStateMachine().animation_timing(2)
        assert [timing.page_offset(index) for index in range(3)] == [0, CANVAS_WIDTH, 2 * CANVAS_WIDTH]

    def test_zero_pages_rejected(self):
        """Test a cycle needs at least one page."""
        with pytest.raises(ValueError):
            PageStateMachine().animation_timing(0)
