"""Assembles the SVG image and JSON metadata documents."""

import logging
from typing import Optional

from death_mountain_renderer.engine.byte_codec import ByteCodec
from death_mountain_renderer.engine.item_catalog import ItemCatalog
from death_mountain_renderer.engine.output_validator import OutputValidator
from death_mountain_renderer.engine.page_state import (
    AdventurerState,
    PageMode,
    PageStateMachine,
    PageType,
)
from death_mountain_renderer.engine.template_engine import TemplateEngine
from death_mountain_renderer.engine.text_layout import TextLayout
from death_mountain_renderer.engine.theme import ThemeTable
from death_mountain_renderer.helpers.debug import log_call
from death_mountain_renderer.models.adventurer import AdventurerSnapshot
from death_mountain_renderer.models.metadata import TokenMetadata, Trait
from death_mountain_renderer.render_config import RenderConfig

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
JSON_MEDIA_TYPE = "application/json"
TOKEN_ID_MAX = 2**64 - 1

_STATE_LABELS = {
    AdventurerState.DEAD: "Dead",
    AdventurerState.IN_COMBAT: "In Combat",
    AdventurerState.NORMAL: "Exploring",
}

_PAGE_RENDERERS = {
    PageType.INVENTORY: TemplateEngine.inventory_page,
    PageType.ITEM_BAG: TemplateEngine.item_bag_page,
    PageType.BATTLE: TemplateEngine.battle_page,
    PageType.JOURNEY: TemplateEngine.journey_page,
}


class RenderError(RuntimeError):
    """A rendered document failed its structural checks."""


def data_uri(media_type: str, payload: str) -> str:
    """Base64 data URI for a UTF-8 text payload."""
    return f"data:{media_type};base64,{ByteCodec.base64_encode(payload.encode('utf-8'))}"


class MetadataAssembler:
    """Renders adventurer snapshots into token images and metadata."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        """
        Initialize the assembler.

        Args:
            config: Renderer configuration (defaults from the environment)
        """
        self._config = config or RenderConfig()
        self._pages = self._config.build_state_machine()
        self._validator = OutputValidator()

    @property
    def config(self) -> RenderConfig:
        """Get current config."""
        return self._config

    @property
    def state_machine(self) -> PageStateMachine:
        """Page state machine in use."""
        return self._pages

    # -- images -----------------------------------------------------------

    @staticmethod
    def render_page_body(page_type: PageType, snapshot: AdventurerSnapshot) -> str:
        """Content of one page with its theme applied."""
        return _PAGE_RENDERERS[page_type](snapshot, ThemeTable.theme_for(page_type.value))

    def page_mode(self, snapshot: AdventurerSnapshot) -> PageMode:
        """Current page mode of a snapshot."""
        return self._pages.page_mode(snapshot)

    def page_count(self, snapshot: AdventurerSnapshot) -> int:
        """Number of pages a paginated consumer can request."""
        return self._pages.page_count(snapshot)

    @log_call
    def render_image(self, snapshot: AdventurerSnapshot) -> str:
        """
        Full SVG document for a snapshot.

        Battle-only and single-page modes are static; a multi-page normal
        mode slides through its pages in a loop.
        """
        mode = self._pages.page_mode(snapshot)
        if mode.page_count == 1:
            svg = TemplateEngine.static_document(self.render_page_body(mode.pages[0], snapshot))
        else:
            timing = self._pages.animation_timing(mode.page_count)
            bodies = [self.render_page_body(page_type, snapshot) for page_type in mode.pages]
            bodies.append(bodies[0])
            svg = TemplateEngine.animated_document(
                bodies,
                [timing.page_offset(index) for index in range(len(bodies))],
                timing.css_keyframes(),
                timing.cycle_seconds,
            )
        self._check_svg(svg)
        return svg

    def render_page_image(self, snapshot: AdventurerSnapshot, page_index: int) -> str:
        """
        Static SVG document for a single page of the current mode.

        Raises:
            ValueError: If page_index is outside the current mode's pages
        """
        page_type = self._pages.page_type_at(snapshot, page_index)
        svg = TemplateEngine.static_document(self.render_page_body(page_type, snapshot))
        self._check_svg(svg)
        return svg

    def image_data_uri(self, snapshot: AdventurerSnapshot) -> str:
        """SVG image as a base64 data URI."""
        return data_uri(SVG_MEDIA_TYPE, self.render_image(snapshot))

    # -- metadata ---------------------------------------------------------

    @log_call
    def render_traits(self, snapshot: AdventurerSnapshot) -> list[Trait]:
        """Trait list: vitals, every stat, battle state and equipped item names."""
        number = TextLayout.number
        stats = snapshot.stats
        traits = [
            Trait(trait_type="Health", value=number(snapshot.health)),
            Trait(trait_type="Max Health", value=number(snapshot.max_health)),
            Trait(trait_type="Level", value=number(snapshot.level)),
            Trait(trait_type="XP", value=number(snapshot.xp)),
            Trait(trait_type="Gold", value=number(snapshot.gold)),
            Trait(trait_type="Strength", value=number(stats.strength)),
            Trait(trait_type="Dexterity", value=number(stats.dexterity)),
            Trait(trait_type="Vitality", value=number(stats.vitality)),
            Trait(trait_type="Intelligence", value=number(stats.intelligence)),
            Trait(trait_type="Wisdom", value=number(stats.wisdom)),
            Trait(trait_type="Charisma", value=number(stats.charisma)),
            Trait(trait_type="Luck", value=number(stats.luck)),
            Trait(trait_type="Beast Health", value=number(snapshot.beast_health)),
            Trait(trait_type="Stat Upgrades", value=number(snapshot.stat_upgrades_available)),
            Trait(trait_type="State", value=_STATE_LABELS[PageStateMachine.adventurer_state(snapshot)]),
        ]
        for slot, item in snapshot.equipment.slots():
            view = ItemCatalog.resolve_item(item)
            traits.append(Trait(trait_type=slot.value, value=view.name if not view.is_empty else "None"))
        return traits

    @staticmethod
    def token_name(token_id: int, snapshot: AdventurerSnapshot) -> str:
        """Display name of the token."""
        name = snapshot.name.strip() or "Adventurer"
        return f"{name} #{TextLayout.number(token_id)}"

    @staticmethod
    def render_description(snapshot: AdventurerSnapshot) -> str:
        """One-line description of the adventurer's progress."""
        number = TextLayout.number
        return (
            f"Death Mountain adventurer. Level {number(snapshot.level)}, "
            f"{TextLayout.fraction(snapshot.health, snapshot.max_health)} health, "
            f"{number(snapshot.gold)} gold."
        )

    def build_metadata(self, token_id: int, snapshot: AdventurerSnapshot, svg: str) -> TokenMetadata:
        """Metadata model around an already rendered image."""
        return TokenMetadata(
            name=self.token_name(token_id, snapshot),
            description=self.render_description(snapshot),
            image=data_uri(SVG_MEDIA_TYPE, svg),
            attributes=self.render_traits(snapshot),
        )

    @log_call
    def render_metadata(self, token_id: int, snapshot: AdventurerSnapshot) -> str:
        """
        Complete token metadata as a base64 JSON data URI.

        Args:
            token_id: 64-bit token identifier
            snapshot: Adventurer to render

        Returns:
            'data:application/json;base64,...' text
        """
        _check_token_id(token_id)
        metadata = self.build_metadata(token_id, snapshot, self.render_image(snapshot))
        return self._encode_metadata(metadata)

    @log_call
    def render_page(self, token_id: int, snapshot: AdventurerSnapshot, page_index: int) -> str:
        """
        Token metadata whose image is a single static page.

        Raises:
            ValueError: If page_index is outside the current mode's pages
        """
        _check_token_id(token_id)
        metadata = self.build_metadata(token_id, snapshot, self.render_page_image(snapshot, page_index))
        return self._encode_metadata(metadata)

    def _encode_metadata(self, metadata: TokenMetadata) -> str:
        """Serialize compactly, check and wrap as a data URI."""
        document = metadata.model_dump_json()
        if self._config.validate_output:
            is_valid, _, error = self._validator.validate(document, TokenMetadata)
            if not is_valid:
                raise RenderError(f"Rendered metadata is invalid: {error}")
        return data_uri(JSON_MEDIA_TYPE, document)

    def _check_svg(self, svg: str) -> None:
        """Raise RenderError when validation is on and the SVG is malformed."""
        if not self._config.validate_output:
            return
        is_valid, error = self._validator.validate_svg(svg)
        if not is_valid:
            raise RenderError(f"Rendered SVG is malformed: {error}")


def _check_token_id(token_id: int) -> None:
    """Token ids are unsigned 64-bit integers."""
    if not 0 <= token_id <= TOKEN_ID_MAX:
        raise ValueError(f"Token id out of u64 range: {token_id}")
