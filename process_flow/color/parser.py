"""
Color Parser — converts a human-authored color string into an RGB triplet.

Supported formats, tried in order (first match wins):
  - Functional: rgb(0, 122, 255), rgba(0, 255, 255, 0.5), rgba(0 122 255 / 80%)
  - Hex: #f0f, #FF00FF

Alpha values are accepted and ignored. Channels are not range-checked:
rgb(999, 999, 999) parses to (999, 999, 999).

An unparseable value yields None. That is an expected outcome, not an error.
"""

import re
from typing import Callable, List, Optional

from process_flow.models.flow import RGBTriplet

FormatParser = Callable[[str], Optional[RGBTriplet]]

_RGBA_PATTERN = re.compile(r"rgba?\((\d+)[, ]+(\d+)[, ]+(\d+)(?:[, /]+[\d.%]+)?\)", re.ASCII)
_HEX_PATTERN = re.compile(r"#([a-f\d]{3}|[a-f\d]{6})", re.IGNORECASE | re.ASCII)


def _parse_functional(value: str) -> Optional[RGBTriplet]:
    match = _RGBA_PATTERN.fullmatch(value)
    if not match:
        return None
    red, green, blue = (int(channel) for channel in match.groups())
    return (red, green, blue)


def _parse_hex(value: str) -> Optional[RGBTriplet]:
    match = _HEX_PATTERN.fullmatch(value)
    if not match:
        return None
    digits = match.group(1)
    if len(digits) != 6:
        # Short form: each digit stands for a doubled pair (f0f -> ff00ff)
        digits = "".join(d * 2 for d in digits)
    return (
        int(digits[0:2], 16),  # Red
        int(digits[2:4], 16),  # Green
        int(digits[4:6], 16),  # Blue
    )


def format_triplet(triplet: RGBTriplet, separator: str = ", ") -> str:
    """Render a triplet the way choice parameters carry it, e.g. "0, 122, 255"."""
    return separator.join(str(channel) for channel in triplet)


class ColorParser:
    """
    Ordered registry of color format parsers.

    Built-in formats are registered first; custom formats added through
    register_format() are tried after them.
    """

    def __init__(self):
        self._formats: List[FormatParser] = []
        self._register_default_formats()

    def _register_default_formats(self) -> None:
        self._formats.append(_parse_functional)
        self._formats.append(_parse_hex)

    def register_format(self, parser: FormatParser) -> None:
        """Register an additional format parser."""
        self._formats.append(parser)

    def parse(self, value: Optional[str]) -> Optional[RGBTriplet]:
        """Parse a color string. Returns None if no format matches."""
        if not isinstance(value, str):
            return None
        for fmt in self._formats:
            triplet = fmt(value)
            if triplet is not None:
                return triplet
        return None


_default_parser = ColorParser()


def parse_color(value: Optional[str]) -> Optional[RGBTriplet]:
    """Parse a color string with the built-in formats."""
    return _default_parser.parse(value)
