"""Text helpers: name sizing, word wrapping, escaping and pattern search."""

import re
from enum import Enum

from death_mountain_renderer.engine.byte_codec import ByteCodec

NAME_TRUNCATE_PREFIX = 28
NAME_ELLIPSIS = "..."

# Item names in slot boxes
ITEM_NAME_LINE_CHARS = 16
ITEM_NAME_MAX_LINES = 2

_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]")


class FontClass(str, Enum):
    """Size classes for the adventurer name."""

    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"
    TINY = "tiny"


FONT_SIZES = {
    FontClass.LARGE: 24,
    FontClass.MEDIUM: 20,
    FontClass.SMALL: 16,
    FontClass.TINY: 12,
}


class TextLayout:
    """Pure text layout helpers used by the template engine."""

    @staticmethod
    def name_font_class(name: str) -> FontClass:
        """Pick the name font class from its length (first match wins)."""
        length = len(name)
        if length <= 10:
            return FontClass.LARGE
        if length <= 16:
            return FontClass.MEDIUM
        if length <= 30:
            return FontClass.SMALL
        return FontClass.TINY

    @staticmethod
    def name_font_size(name: str) -> int:
        """Font size in pixels for the name."""
        return FONT_SIZES[TextLayout.name_font_class(name)]

    @staticmethod
    def display_name(name: str) -> str:
        """
        Name as shown on the card.

        Names of 31 characters or more keep their first 28 characters followed
        by '...', so the displayed text never exceeds 31 characters.
        """
        if TextLayout.name_font_class(name) is FontClass.TINY:
            return name[:NAME_TRUNCATE_PREFIX] + NAME_ELLIPSIS
        return name

    @staticmethod
    def wrap_words(
        text: str,
        line_chars: int = ITEM_NAME_LINE_CHARS,
        max_lines: int = ITEM_NAME_MAX_LINES,
    ) -> list[str]:
        """
        Greedily split text on spaces into at most max_lines lines.

        Words that do not fit in the last line are appended to it anyway.
        """
        words = [word for word in text.split(" ") if word]
        lines: list[str] = []
        for word in words:
            if not lines:
                lines.append(word)
            elif len(lines[-1]) + 1 + len(word) <= line_chars or len(lines) >= max_lines:
                lines[-1] = f"{lines[-1]} {word}"
            else:
                lines.append(word)
        return lines

    @staticmethod
    def escape_xml(text: str) -> str:
        """Escape text for use inside SVG text nodes and attributes."""
        cleaned = _XML_INVALID_CHARS.sub("", text)
        return (
            cleaned.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#39;")
        )

    @staticmethod
    def number(value: int) -> str:
        """Decimal text for a counter value."""
        return ByteCodec.integer_to_decimal_string(value)

    @staticmethod
    def fraction(numerator: int, denominator: int) -> str:
        """'a/b' text, e.g. for health."""
        return f"{TextLayout.number(numerator)}/{TextLayout.number(denominator)}"

    @staticmethod
    def percent(numerator: int, denominator: int) -> str:
        """
        numerator/denominator as a CSS percentage with at most two decimals.

        Uses integer arithmetic (floored) so the text is identical on every run.
        """
        if denominator <= 0:
            return "0%"
        hundredths = numerator * 10000 // denominator
        whole, fraction = divmod(hundredths, 100)
        if fraction == 0:
            return f"{whole}%"
        return f"{whole}.{fraction:02d}".rstrip("0") + "%"

    @staticmethod
    def starts_with(text: str, pattern: str) -> bool:
        """Whether text begins with pattern; the empty pattern always matches."""
        return text.startswith(pattern)

    @staticmethod
    def ends_with(text: str, pattern: str) -> bool:
        """Whether text ends with pattern; the empty pattern always matches."""
        return text.endswith(pattern)

    @staticmethod
    def contains(text: str, pattern: str) -> bool:
        """Whether pattern occurs in text; the empty pattern always matches."""
        return pattern in text
