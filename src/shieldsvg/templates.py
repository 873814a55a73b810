"""Jinja2 rendering of layout results into SVG markup."""

from __future__ import annotations

import re
from dataclasses import fields
from pathlib import Path

import jinja2

from shieldsvg.layout import BadgeStyle, LayoutResult
from shieldsvg.log import get_logger

logger = get_logger("templates")

_TEMPLATES_DIR = Path(__file__).parent / "svg"
_WHITESPACE_RE = re.compile(r"\s+")


def minify_template(source: str) -> str:
    """Collapse a pretty-printed SVG template onto a single line.

    Lines are trimmed and joined without separators, so a template line must
    never end in the middle of a tag.
    """
    joined = "".join(line.strip() for line in source.splitlines())
    joined = _WHITESPACE_RE.sub(" ", joined)
    return joined.replace(" />", "/>").replace("> <", "><")


def load_template(name: str) -> str | None:
    path = _TEMPLATES_DIR / name
    if not path.is_file():
        return None
    return minify_template(path.read_text(encoding="utf-8"))


def format_number(value) -> str:
    """Print integral values without a decimal point (``595.0`` -> ``595``)."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


_JINJA2_ENVIRONMENT = jinja2.Environment(
    loader=jinja2.FunctionLoader(load_template),
    autoescape=jinja2.select_autoescape(["svg"]),
    undefined=jinja2.StrictUndefined,
)
_JINJA2_ENVIRONMENT.filters["num"] = format_number


def template_name(style: BadgeStyle) -> str:
    return f"{style.value}.svg"


def layout_context(layout: LayoutResult) -> dict:
    return {f.name: getattr(layout, f.name) for f in fields(layout)}


def render(layout: LayoutResult) -> str:
    """Render ``layout`` with its style's template.

    Template failures do not raise: the result is an SVG comment describing
    the error so callers always get a string back.
    """
    try:
        template = _JINJA2_ENVIRONMENT.get_template(template_name(layout.style))
        return template.render(**layout_context(layout))
    except jinja2.TemplateError as e:
        logger.error("Failed to render %s badge: %s", layout.style.value, e)
        return f"<!-- Template render error: {e} -->"
