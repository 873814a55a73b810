"""Color token normalization and contrast-aware text colors.

Accepts four dialects: the badge service's named colors, their aliases,
bare or ``#``-prefixed 3/6-digit hex, and any CSS Color 4 value
(``rgb(0 128 0)``, ``hsla()``, ``transparent``, keywords such as
``whitesmoke``).
"""

from __future__ import annotations

import re

from tinycss2.color4 import Color, parse_color

from shieldsvg.cache import LRUCache
from shieldsvg.log import get_logger

logger = get_logger("colors")

NAMED_COLORS: dict[str, str] = {
    "brightgreen": "#4c1",
    "green": "#97ca00",
    "yellow": "#dfb317",
    "yellowgreen": "#a4a61d",
    "orange": "#fe7d37",
    "red": "#e05d44",
    "blue": "#007ec6",
    "grey": "#555",
    "lightgrey": "#9f9f9f",
}

ALIASES: dict[str, str] = {
    "gray": "grey",
    "lightgray": "lightgrey",
    "critical": "red",
    "important": "orange",
    "success": "brightgreen",
    "informational": "blue",
    "inactive": "lightgrey",
}

DEFAULT_LABEL_COLOR = "#555"
DEFAULT_MESSAGE_COLOR = "#007ec6"

DARK_BACKGROUND_PAIR = ("#fff", "#010101")
LIGHT_BACKGROUND_PAIR = ("#333", "#ccc")
BRIGHTNESS_THRESHOLD = 0.69

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$")


def default_label_color() -> str:
    return DEFAULT_LABEL_COLOR


def default_message_color() -> str:
    return DEFAULT_MESSAGE_COLOR


def is_valid_hex(token: str) -> bool:
    """True for 3- or 6-digit hex, with or without a leading ``#``."""
    return _HEX_RE.match(token.lower()) is not None


def parse_css_color(token: str) -> Color | None:
    """Parse ``token`` as a CSS color; ``currentcolor`` and garbage give None."""
    color = parse_color(token)
    if isinstance(color, Color):
        return color
    return None


def is_css_color(token: str) -> bool:
    return parse_css_color(token) is not None


def css_to_hex(token: str, default: str) -> str:
    """Convert any parseable CSS color to ``#rrggbb`` (``#rrggbbaa`` if translucent)."""
    color = parse_css_color(token)
    if color is None:
        color = parse_css_color(default)
    if color is None:
        return "#000000"
    *channels, alpha = color.to("srgb")
    rgb = [round(min(max(c or 0.0, 0.0), 1.0) * 255) for c in channels[:3]]
    if alpha < 1:
        return "#{:02x}{:02x}{:02x}{:02x}".format(*rgb, round(alpha * 255))
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def contrast_pair(hex_color: str) -> tuple[str, str]:
    """Return ``(foreground, shadow)`` text colors readable on ``hex_color``.

    Uses perceived brightness (0.299 R + 0.587 G + 0.114 B) / 255. Dark
    backgrounds (brightness <= 0.69) get white text; light ones get dark grey.
    Anything that is not 3 or 6 hex digits counts as black.
    """
    digits = hex_color.lstrip("#")
    try:
        if len(digits) == 3:
            r, g, b = (int(c * 2, 16) for c in digits)
        elif len(digits) == 6:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        else:
            r = g = b = 0
    except ValueError:
        r = g = b = 0
    brightness = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    if brightness <= BRIGHTNESS_THRESHOLD:
        return DARK_BACKGROUND_PAIR
    return LIGHT_BACKGROUND_PAIR


class ColorResolver:
    """Normalizes color tokens, memoizing both resolution steps."""

    def __init__(
        self,
        normalize_cache: LRUCache | None = None,
        svg_cache: LRUCache | None = None,
    ) -> None:
        self.normalize_cache: LRUCache = normalize_cache if normalize_cache is not None else LRUCache(512)
        self.svg_cache: LRUCache = svg_cache if svg_cache is not None else LRUCache(256)

    def normalize(self, token: str | None) -> str | None:
        """Canonical form of ``token``, or None when it is not a color.

        Named colors and aliases resolve to a name (aliases to their target),
        hex gains a ``#`` prefix, other CSS colors pass through lowercased.
        """
        if token is None:
            return None
        key = token.strip().lower()
        if not key:
            return None
        return self.normalize_cache.get_or_compute(key, lambda: _normalize_uncached(key))

    def to_svg_color(self, token: str | None) -> str | None:
        """Like :meth:`normalize`, but named colors and aliases expand to hex."""
        if token is None:
            return None
        key = token.strip().lower()
        return self.svg_cache.get_or_compute(key, lambda: self._to_svg_uncached(key))

    def _to_svg_uncached(self, key: str) -> str | None:
        normalized = self.normalize(key)
        if normalized is None:
            logger.debug("Unrecognized color %r", key)
            return None
        if normalized in NAMED_COLORS:
            return NAMED_COLORS[normalized]
        if normalized in ALIASES:
            return NAMED_COLORS.get(ALIASES[normalized])
        return normalized

    def resolve(self, token: str | None, default: str) -> str:
        """SVG fill for ``token``, falling back to ``default``."""
        return self.to_svg_color(token) or default


def _normalize_uncached(key: str) -> str | None:
    if key in NAMED_COLORS:
        return key
    if key in ALIASES:
        return ALIASES[key]
    if is_valid_hex(key):
        return "#" + key.lstrip("#")
    if is_css_color(key):
        return key
    return None


default_resolver = ColorResolver()


def normalize_color(token: str | None) -> str | None:
    return default_resolver.normalize(token)


def to_svg_color(token: str | None) -> str | None:
    return default_resolver.to_svg_color(token)
