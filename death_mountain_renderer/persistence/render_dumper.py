"""Render dumper for exporting rendered pages and metadata to disk."""

import json
import logging
from pathlib import Path
from typing import Optional

from death_mountain_renderer.config import DEFAULT_OUTPUT_DIR
from death_mountain_renderer.engine.metadata_assembler import (
    JSON_MEDIA_TYPE,
    SVG_MEDIA_TYPE,
    MetadataAssembler,
    data_uri,
)
from death_mountain_renderer.engine.output_validator import OutputValidator
from death_mountain_renderer.models.adventurer import AdventurerSnapshot

logger = logging.getLogger(__name__.split(".")[-1])


class RenderDumper:
    """Writes rendered SVG pages, data URIs and metadata for inspection."""

    def __init__(self, output_directory: str = DEFAULT_OUTPUT_DIR, assembler: Optional[MetadataAssembler] = None):
        """
        Initialize render dumper.

        Args:
            output_directory: Directory where renders will be written
            assembler: Assembler to render with (default configuration if omitted)
        """
        self.output_directory = Path(output_directory)
        self.assembler = assembler or MetadataAssembler()
        self._ensure_directory_exists(self.output_directory)

    def _ensure_directory_exists(self, directory: Path) -> None:
        """Ensure a directory exists, create if it doesn't."""
        try:
            directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"Render output directory ready: {directory}")
        except PermissionError:
            logger.error(f"Permission denied creating directory: {directory}")
            raise
        except OSError as e:
            logger.error(f"Error creating directory {directory}: {e}")
            raise

    def _token_directory(self, token_id: int) -> Path:
        """Directory for one token's renders."""
        token_dir = self.output_directory / f"token_{token_id}"
        self._ensure_directory_exists(token_dir)
        return token_dir

    def _write_text(self, file_path: Path, content: str) -> Path:
        """Write a file atomically through a temporary sibling."""
        try:
            temp_path = file_path.with_suffix(file_path.suffix + ".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(file_path)
            logger.debug(f"Wrote {len(content)} characters to {file_path}")
            return file_path
        except Exception as e:
            logger.error(f"Error writing {file_path}: {e}", exc_info=True)
            raise

    def dump_pages(self, token_id: int, snapshot: AdventurerSnapshot) -> list[Path]:
        """
        Write every page of the current mode as a static SVG and its data URI.

        Returns:
            Paths written, SVG and data URI per page
        """
        token_dir = self._token_directory(token_id)
        mode = self.assembler.page_mode(snapshot)
        written = []
        for page_index, page_type in enumerate(mode.pages):
            svg = self.assembler.render_page_image(snapshot, page_index)
            stem = f"page_{page_index}_{page_type.name.lower()}"
            written.append(self._write_text(token_dir / f"{stem}.svg", svg))
            written.append(self._write_text(token_dir / f"{stem}_datauri.txt", data_uri(SVG_MEDIA_TYPE, svg)))
        return written

    def dump_animated(self, token_id: int, snapshot: AdventurerSnapshot) -> Path:
        """Write the full (possibly animated) image, named after the page mode."""
        mode = self.assembler.page_mode(snapshot)
        svg = self.assembler.render_image(snapshot)
        return self._write_text(self._token_directory(token_id) / f"animated_{mode.kind}_mode.svg", svg)

    def dump_metadata(self, token_id: int, snapshot: AdventurerSnapshot) -> Path:
        """Write the decoded metadata document, pretty-printed."""
        uri = self.assembler.render_metadata(token_id, snapshot)
        is_valid, payload, error = OutputValidator().decode_data_uri(uri, JSON_MEDIA_TYPE)
        if not is_valid:
            raise ValueError(f"Could not decode metadata for token {token_id}: {error}")
        document = json.dumps(json.loads(payload), indent=2, ensure_ascii=False)
        return self._write_text(self._token_directory(token_id) / "metadata.json", document)

    def dump_size_comparison(self, token_id: int, snapshot: AdventurerSnapshot) -> Path:
        """Write byte sizes of each page, the full image and the metadata URI."""
        mode = self.assembler.page_mode(snapshot)
        lines = []
        for page_index, page_type in enumerate(mode.pages):
            svg = self.assembler.render_page_image(snapshot, page_index)
            lines.append(f"page {page_index} ({page_type.name.lower()}): {len(svg.encode('utf-8'))} bytes")
        image = self.assembler.render_image(snapshot)
        lines.append(f"full image ({mode.kind}): {len(image.encode('utf-8'))} bytes")
        uri = self.assembler.render_metadata(token_id, snapshot)
        lines.append(f"metadata data URI: {len(uri)} bytes")
        return self._write_text(self._token_directory(token_id) / "size_comparison.txt", "\n".join(lines) + "\n")

    def dump_all(self, token_id: int, snapshot: AdventurerSnapshot) -> list[Path]:
        """Write pages, full image, metadata and size comparison for a token."""
        written = self.dump_pages(token_id, snapshot)
        written.append(self.dump_animated(token_id, snapshot))
        written.append(self.dump_metadata(token_id, snapshot))
        written.append(self.dump_size_comparison(token_id, snapshot))
        logger.info(f"Exported {len(written)} file(s) for token {token_id} to {self.output_directory}")
        return written
