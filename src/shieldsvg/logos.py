"""Logo resolution: icon name -> recolored, base64-embedded SVG data URI."""

from __future__ import annotations

import base64
from typing import Callable, Optional

from shieldsvg.log import get_logger

logger = get_logger("logos")

IconLookup = Callable[[str], Optional[str]]

DATA_URI_PREFIX = "data:image/svg+xml;base64,"


def simpleicons_lookup(name: str) -> str | None:
    """Look ``name`` up in the Simple Icons set; None when unknown."""
    from simpleicons.all import icons

    icon = icons.get(name.lower())
    if icon is None:
        return None
    return icon.svg


def default_logo_color(social: bool) -> str:
    return "#000000" if social else "whitesmoke"


def recolor_svg(svg: str, color: str) -> str:
    """Set ``fill`` on the root ``<svg`` element."""
    return svg.replace("<svg", f'<svg fill="{color}"', 1)


def encode_svg(svg: str) -> str:
    return DATA_URI_PREFIX + base64.b64encode(svg.encode("utf-8")).decode("ascii")


def resolve_logo(
    logo: str | None,
    color: str,
    lookup: IconLookup = simpleicons_lookup,
) -> str | None:
    """Turn a logo argument into an embeddable data URI.

    ``logo`` may be an icon name, literal ``<svg`` markup or an existing
    ``data:`` URI (returned as-is). Unknown names resolve to None so the
    badge renders without a logo.
    """
    if logo is None:
        return None
    logo = logo.strip()
    if not logo:
        return None
    if logo.startswith("data:"):
        return logo
    if logo.startswith("<svg"):
        svg = logo
    else:
        svg = lookup(logo)
        if not svg:
            logger.debug("No icon named %r; rendering without logo", logo)
            return None
    return encode_svg(recolor_svg(svg, color))
