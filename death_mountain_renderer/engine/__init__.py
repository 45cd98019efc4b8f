"""Rendering engine package."""

from death_mountain_renderer.engine.byte_codec import U256, ByteCodec
from death_mountain_renderer.engine.item_catalog import ItemCatalog, calculate_greatness
from death_mountain_renderer.engine.output_validator import OutputValidator
from death_mountain_renderer.engine.page_state import (
    AdventurerState,
    AnimationTiming,
    BattleOnlyMode,
    NormalMode,
    PageStateMachine,
    PageType,
)
from death_mountain_renderer.engine.template_engine import HealthState, TemplateEngine
from death_mountain_renderer.engine.text_layout import FontClass, TextLayout
from death_mountain_renderer.engine.theme import Theme, ThemeTable

__all__ = [
    "AdventurerState",
    "AnimationTiming",
    "BattleOnlyMode",
    "ByteCodec",
    "FontClass",
    "HealthState",
    "ItemCatalog",
    "NormalMode",
    "OutputValidator",
    "PageStateMachine",
    "PageType",
    "TemplateEngine",
    "TextLayout",
    "Theme",
    "ThemeTable",
    "U256",
    "calculate_greatness",
]
