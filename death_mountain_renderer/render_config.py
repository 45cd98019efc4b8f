"""Renderer configuration and management."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from death_mountain_renderer.config import (
    DEFAULT_NORMAL_PAGES,
    DEFAULT_PAGE_DISPLAY_SECONDS,
    DEFAULT_PAGE_TRANSITION_SECONDS,
    DEFAULT_VALIDATE_OUTPUT,
)
from death_mountain_renderer.engine.page_state import PageStateMachine, PageType


class RenderConfig(BaseModel):
    """Renderer configuration model."""

    normal_pages: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NORMAL_PAGES),
        min_length=1,
        description="Pages cycled when the adventurer is not in battle",
    )
    page_display_seconds: int = Field(
        default=DEFAULT_PAGE_DISPLAY_SECONDS, ge=1, le=3600, description="Seconds each page stays on screen"
    )
    page_transition_seconds: int = Field(
        default=DEFAULT_PAGE_TRANSITION_SECONDS, ge=1, le=3600, description="Seconds spent sliding between pages"
    )
    validate_output: bool = Field(
        default=DEFAULT_VALIDATE_OUTPUT, description="Whether rendered documents are checked before being returned"
    )

    @field_validator("normal_pages")
    @classmethod
    def known_unique_pages(cls, value: list[str]) -> list[str]:
        """Normalize page names and reject unknown or repeated ones."""
        names = [name.strip().lower() for name in value]
        for name in names:
            PageType.from_name(name)
        if len(set(names)) != len(names):
            raise ValueError(f"Page names must be unique: {names}")
        return names

    def page_types(self) -> tuple[PageType, ...]:
        """Configured normal pages as page types."""
        return tuple(PageType.from_name(name) for name in self.normal_pages)

    def build_state_machine(self) -> PageStateMachine:
        """State machine using this configuration."""
        return PageStateMachine(
            normal_pages=self.page_types(),
            display_seconds=self.page_display_seconds,
            transition_seconds=self.page_transition_seconds,
        )


class RenderConfigManager:
    """Manages renderer configuration and hot-reload."""

    def __init__(self, initial_config: Optional[RenderConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: RenderConfig) -> None:
        """Update configuration."""
        self._config = new_config
