"""Text width measurement from per-font character width tables.

Each supported font is backed by a JSON table of ``[lower, upper, width]``
codepoint ranges shipped in ``shieldsvg/fonts``. Tables load lazily on first
use and are shared read-only afterwards.
"""

from __future__ import annotations

import json
import math
import threading
from enum import Enum
from pathlib import Path

from shieldsvg.cache import LRUCache
from shieldsvg.log import get_logger

logger = get_logger("measurer")

_FONTS_DIR = Path(__file__).parent / "fonts"

WIDTH_CACHE_SIZE = 1024
# Longer texts are measured every time rather than pinned in the cache.
MAX_CACHED_TEXT_LENGTH = 1024


class MeasurementError(ValueError):
    """Raised when a character has no width entry and guessing is disabled."""


class Font(str, Enum):
    VERDANA_11 = "verdana-11px-normal"
    HELVETICA_BOLD_11 = "helvetica-11px-bold"
    VERDANA_10 = "verdana-10px-normal"
    VERDANA_BOLD_10 = "verdana-10px-bold"


def is_control_char(code: int) -> bool:
    return code <= 31 or code == 127


class CharWidthTable:
    """Codepoint -> pixel width lookup for a single font at a single size."""

    def __init__(self, ranges: list[tuple[int, int, float]]) -> None:
        self._widths: dict[int, float] = {}
        for lower, upper, width in ranges:
            for code in range(lower, upper + 1):
                self._widths[code] = width
        # Unknown glyphs are guessed as wide as an "m".
        self.em_width = 0.0
        self.em_width = self.width_of("m")

    @classmethod
    def from_ranges(cls, ranges) -> CharWidthTable:
        return cls([(int(lo), int(hi), float(w)) for lo, hi, w in ranges])

    @classmethod
    def from_json(cls, text: str) -> CharWidthTable:
        """Build a table from JSON text: a list of ``[lower, upper, width]`` triples."""
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("width table JSON must be a list of [lower, upper, width]")
        ranges = []
        for item in data:
            if not isinstance(item, list) or len(item) != 3:
                raise ValueError(f"invalid width table entry: {item!r}")
            ranges.append(item)
        return cls.from_ranges(ranges)

    @classmethod
    def load(cls, path: Path) -> CharWidthTable:
        return cls.from_json(path.read_text(encoding="utf-8"))

    def width_of_code(self, code: int) -> float | None:
        """Width of one codepoint; control characters are 0, unknown ones None."""
        if is_control_char(code):
            return 0.0
        return self._widths.get(code)

    def width_of(self, text: str, allow_fallback: bool = True) -> float:
        """Sum of per-character widths of ``text`` (no kerning or ligatures)."""
        total = 0.0
        for ch in text:
            width = self.width_of_code(ord(ch))
            if width is None:
                if not allow_fallback:
                    raise MeasurementError(
                        f"No width available for character {ch!r} (U+{ord(ch):04X}) in {text!r}"
                    )
                width = self.em_width
            total += width
        return total


_TABLES: dict[Font, CharWidthTable] = {}
_TABLES_LOCK = threading.Lock()


def get_width_table(font: Font) -> CharWidthTable:
    """Return the shared table for ``font``, loading it on first use."""
    table = _TABLES.get(font)
    if table is not None:
        return table
    with _TABLES_LOCK:
        table = _TABLES.get(font)
        if table is None:
            table = CharWidthTable.load(_FONTS_DIR / f"{font.value}.json")
            _TABLES[font] = table
            logger.debug("Loaded width table %s (em width %.3f)", font.value, table.em_width)
    return table


def text_width(text: str, font: Font, allow_fallback: bool = True) -> float:
    """Raw (unrounded) pixel width of ``text`` in ``font``."""
    return get_width_table(font).width_of(text, allow_fallback=allow_fallback)


def round_up_to_odd(value: float) -> int:
    """Floor ``value`` and bump even results to the next odd integer."""
    n = math.floor(value)
    return n + 1 if n % 2 == 0 else n


class TextMeasurer:
    """Caching wrapper that returns the odd-rounded width used for layout."""

    def __init__(self, cache: LRUCache | None = None) -> None:
        self.cache: LRUCache = cache if cache is not None else LRUCache(WIDTH_CACHE_SIZE)

    def preferred_width(self, text: str, font: Font) -> int:
        if len(text) > MAX_CACHED_TEXT_LENGTH:
            logger.debug("Measuring %d-character text without caching", len(text))
            return round_up_to_odd(text_width(text, font))
        return self.cache.get_or_compute(
            (text, font), lambda: round_up_to_odd(text_width(text, font))
        )

    def spaced_width(self, text: str, font: Font, letter_spacing: float) -> int:
        """Truncated raw width plus ``letter_spacing`` per character; 0 for empty text."""
        if not text:
            return 0
        return int(text_width(text, font) + letter_spacing * len(text))


default_measurer = TextMeasurer()
