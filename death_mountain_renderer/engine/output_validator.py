"""Structural checks for rendered SVG and metadata documents."""

import json
import logging
import re
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from death_mountain_renderer.engine.byte_codec import ByteCodec
from death_mountain_renderer.engine.text_layout import TextLayout

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"<(/?)([A-Za-z][\w:.-]*)([^<>]*?)(/?)>")
_NEGATIVE_COORDINATE_PATTERN = re.compile(
    r'\s(x|y|x1|y1|x2|y2|cx|cy|r|rx|ry|width|height)="-'
)


class OutputValidator:
    """Validates rendered documents before they leave the renderer."""

    def validate_svg(self, svg: str) -> tuple[bool, Optional[str]]:
        """
        Check that an SVG document is well formed.

        Every opened tag must be closed in order, there must be exactly one
        root svg element and no coordinate attribute may be negative.
        Returns (is_valid, error_message).
        """
        if not TextLayout.starts_with(svg, "<svg") or not TextLayout.ends_with(svg, "</svg>"):
            return self._fail("SVG must start with <svg and end with </svg>")

        match = _NEGATIVE_COORDINATE_PATTERN.search(svg)
        if match:
            return self._fail(f"Negative coordinate attribute: {match.group(1)}")

        stack: list[str] = []
        roots = 0
        for tag in _TAG_PATTERN.finditer(svg):
            closing, name, _, self_closing = tag.groups()
            if closing:
                if not stack or stack[-1] != name:
                    expected = stack[-1] if stack else "nothing"
                    return self._fail(f"Unexpected </{name}>, expected closing of {expected}")
                stack.pop()
            elif self_closing:
                if not stack:
                    return self._fail(f"Element <{name}/> outside the root element")
            else:
                if not stack:
                    roots += 1
                stack.append(name)

        if stack:
            return self._fail(f"Unclosed elements: {stack}")
        if roots != 1:
            return self._fail(f"Expected one root element, found {roots}")
        return True, None

    def validate(
        self,
        output: Any,
        schema: type[T],
        strict: bool = True,
    ) -> tuple[bool, Optional[T], Optional[str]]:
        """
        Validate output against a Pydantic schema.
        Returns (is_valid, parsed_output, error_message).
        """
        if strict and isinstance(output, (str, bytes)):
            try:
                output = json.loads(output)
            except json.JSONDecodeError:
                valid, error = self._fail(f"Output is not valid JSON: {output[:100]!r}")
                return valid, None, error

        try:
            parsed = schema.model_validate(output)
        except ValidationError as e:
            valid, error = self._fail(f"Validation failed: {e.errors()}")
            return valid, None, error
        return True, parsed, None

    def decode_data_uri(self, uri: str, media_type: str) -> tuple[bool, Optional[bytes], Optional[str]]:
        """
        Split a base64 data URI and decode its payload.
        Returns (is_valid, payload, error_message).
        """
        prefix = f"data:{media_type};base64,"
        if not TextLayout.starts_with(uri, prefix):
            valid, error = self._fail(f"Data URI does not start with {prefix}")
            return valid, None, error
        try:
            payload = ByteCodec.base64_decode(uri[len(prefix) :])
        except ValueError as e:
            valid, error = self._fail(f"Data URI payload is not Base64: {e}")
            return valid, None, error
        return True, payload, None

    def _fail(self, message: str) -> tuple[bool, str]:
        """Log a failed check."""
        logger.warning(f"Output validation failed: {message}")
        return False, message
