"""CLI commands for shieldsvg."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from shieldsvg import templates
from shieldsvg.badge import BadgeRenderer, BadgeSpec, default_renderer
from shieldsvg.colors import ColorResolver, contrast_pair, css_to_hex, default_resolver
from shieldsvg.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_KEYS,
    get_defaults,
    set_default,
    unset_default,
)
from shieldsvg.display import (
    print_colors,
    print_config,
    print_config_updated,
    print_error,
    print_render_result,
)
from shieldsvg.layout import BadgeStyle
from shieldsvg.log import configure_logging, get_logger

logger = get_logger("cli")

# BadgeSpec fields settable from flags, minus style which has choices.
_TEXT_FIELDS = ("label", "message", "label_color", "message_color", "link", "extra_link", "logo", "logo_color")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shieldsvg",
        description="Render shields-style SVG badges",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write log output to this file")
    subparsers = parser.add_subparsers(dest="command")

    render_p = subparsers.add_parser("render", help="Render a badge to SVG")
    render_p.add_argument("--style", "-s", choices=[s.value for s in BadgeStyle], default=None)
    for name in _TEXT_FIELDS:
        render_p.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None)
    render_p.add_argument("--json", dest="json_source", default=None, help="Read the badge spec from a JSON file ('-' for stdin)")
    render_p.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")

    colors_p = subparsers.add_parser("colors", help="Show how color tokens resolve")
    colors_p.add_argument("tokens", nargs="+", help="Color names, aliases, hex or CSS colors")

    config_p = subparsers.add_parser("config", help="Show or change badge defaults")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Show stored defaults")
    set_p = config_sub.add_parser("set", help="Store a default")
    set_p.add_argument("key", choices=list(DEFAULT_KEYS))
    set_p.add_argument("value")
    unset_p = config_sub.add_parser("unset", help="Remove a default")
    unset_p.add_argument("key", choices=list(DEFAULT_KEYS))
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    if args.command is None:
        parser.print_help()
        return

    result: dict = {"ok": True}
    if args.command == "render":
        fields = {name: getattr(args, name) for name in _TEXT_FIELDS}
        fields["style"] = args.style
        result = do_render(fields, json_source=args.json_source, output=args.output)
    elif args.command == "colors":
        do_colors(args.tokens)
    elif args.command == "config":
        cfg_cmd = getattr(args, "config_command", None)
        if cfg_cmd == "set":
            result = do_config_set(args.key, args.value)
        elif cfg_cmd == "unset":
            result = do_config_unset(args.key)
        else:
            do_config_show()

    if not result.get("ok"):
        sys.exit(1)


def read_json_spec(source: str) -> dict:
    """Load a JSON badge spec from a file path, or stdin for ``-``."""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("JSON badge spec must be an object")
    return data


def build_spec(fields: dict, json_source: str | None = None, config_path: Path | None = None) -> BadgeSpec:
    """Merge config defaults, a JSON spec and explicit flags, later ones winning."""
    data: dict = dict(get_defaults(config_path))
    if json_source:
        data.update(read_json_spec(json_source))
    data.update({k: v for k, v in fields.items() if v is not None})
    return BadgeSpec.from_dict(data)


def do_render(
    fields: dict,
    json_source: str | None = None,
    output: str | None = None,
    config_path: Path | None = None,
    renderer: BadgeRenderer | None = None,
) -> dict:
    """Render a badge and write it to ``output`` or stdout."""
    renderer = renderer or default_renderer
    try:
        spec = build_spec(fields, json_source=json_source, config_path=config_path)
    except (ValueError, OSError) as e:
        print_error(f"Invalid badge spec: {e}")
        return {"ok": False, "reason": "invalid_spec"}

    layout = renderer.layout(spec)
    svg = templates.render(layout)

    if output is None:
        sys.stdout.write(svg + "\n")
        return {"ok": True, "svg": svg, "output": None}

    output_path = Path(output)
    output_path.write_text(svg, encoding="utf-8")
    logger.debug("Wrote %d bytes to %s", len(svg), output_path)
    result = {
        "ok": True,
        "svg": svg,
        "output": str(output_path.resolve()),
        "output_name": output_path.name,
        "style": spec.style.value,
        "width": layout.total_width,
        "height": layout.height,
        "alt": layout.accessible_text,
    }
    print_render_result(result)
    return result


def describe_colors(tokens: list[str], resolver: ColorResolver | None = None) -> list[dict]:
    resolver = resolver or default_resolver
    rows = []
    for token in tokens:
        fill = resolver.to_svg_color(token)
        rows.append({
            "token": token,
            "normalized": resolver.normalize(token),
            "fill": fill,
            "text": contrast_pair(css_to_hex(fill, "#000"))[0] if fill else "-",
        })
    return rows


def do_colors(tokens: list[str]) -> list[dict]:
    """Print how each token normalizes and which text color it gets."""
    rows = describe_colors(tokens)
    print_colors(rows)
    return rows


def do_config_show(config_path: Path | None = None) -> dict:
    defaults = get_defaults(config_path)
    print_config(defaults, str(config_path or DEFAULT_CONFIG_PATH))
    return defaults


def do_config_set(key: str, value: str, config_path: Path | None = None) -> dict:
    try:
        set_default(key, value, config_path)
    except ValueError as e:
        print_error(str(e))
        return {"ok": False, "reason": "invalid_value"}
    print_config_updated(key, value)
    return {"ok": True, "key": key, "value": value}


def do_config_unset(key: str, config_path: Path | None = None) -> dict:
    try:
        removed = unset_default(key, config_path)
    except ValueError as e:
        print_error(str(e))
        return {"ok": False, "reason": "invalid_key"}
    if not removed:
        print_error(f"No default set for {key}")
        return {"ok": False, "reason": "not_set"}
    print_config_updated(key, None)
    return {"ok": True, "key": key}
