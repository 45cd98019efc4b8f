"""Deterministic SVG and JSON renderer for Death Mountain adventurers."""

from death_mountain_renderer.engine.metadata_assembler import MetadataAssembler, RenderError
from death_mountain_renderer.render_config import RenderConfig

__all__ = [
    "MetadataAssembler",
    "RenderConfig",
    "RenderError",
]
