"""MCP server for shieldsvg.

Exposes badge rendering and color resolution as MCP tools so an assistant can
produce README badges mid-conversation.
Run via: python3 -m shieldsvg.mcp_server
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from shieldsvg.badge import BadgeSpec, default_renderer
from shieldsvg.colors import contrast_pair, css_to_hex, default_resolver
from shieldsvg.layout import BadgeStyle
from shieldsvg.templates import render

mcp = FastMCP(name="shieldsvg")


@mcp.tool()
def render_badge(
    message: str = "",
    label: str = "",
    style: str = "flat",
    label_color: str = "",
    message_color: str = "",
    logo: str = "",
    logo_color: str = "",
    link: str = "",
    extra_link: str = "",
) -> dict[str, Any]:
    """Render a badge as an SVG string.

    Empty arguments count as not given. style: flat, flat-square, plastic,
    social or for-the-badge.
    """
    data = {
        "style": style,
        "label": label or None,
        "message": message,
        "label_color": label_color or None,
        "message_color": message_color or None,
        "logo": logo or None,
        "logo_color": logo_color or None,
        "link": link or None,
        "extra_link": extra_link or None,
    }
    try:
        spec = BadgeSpec.from_dict(data)
    except ValueError as e:
        return {"error": str(e)}
    layout = default_renderer.layout(spec)
    return {
        "svg": render(layout),
        "width": layout.total_width,
        "height": layout.height,
        "style": spec.style.value,
        "accessible_text": layout.accessible_text,
    }


@mcp.tool()
def normalize_color(token: str) -> dict[str, Any]:
    """Resolve a color token (name, alias, hex or CSS color) to its SVG fill."""
    normalized = default_resolver.normalize(token)
    if normalized is None:
        return {"error": f"Not a recognized color: {token!r}"}
    fill = default_resolver.to_svg_color(token)
    text, shadow = contrast_pair(css_to_hex(fill, "#000"))
    return {"token": token, "normalized": normalized, "fill": fill, "text_color": text, "shadow_color": shadow}


@mcp.tool()
def list_styles() -> dict[str, Any]:
    """List the available badge styles."""
    return {"styles": [s.value for s in BadgeStyle], "default": BadgeStyle.FLAT.value}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
