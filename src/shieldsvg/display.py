"""Rich terminal display for shieldsvg."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from shieldsvg.colors import css_to_hex

console = Console()
# Messages go to stderr so SVG written to stdout stays clean.
err_console = Console(stderr=True)


def _swatch(fill: str | None) -> str:
    """A block of the color, as rich markup. Translucency is dropped."""
    if not fill:
        return ""
    hex_color = css_to_hex(fill, "#000")[:7]
    return f"[{hex_color}]████[/]"


def print_render_result(result: dict) -> None:
    """Print where a badge was written and how to embed it."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{escape(str(result.get('output', '')))}[/]")
    lines.append(f"  Style: {result.get('style', 'flat')}  Size: {result.get('width', 0)}x{result.get('height', 0)}")
    lines.append("")
    lines.append("  Add to your README:")
    lines.append(f"  ![{escape(result.get('alt', ''))}]({escape(str(result.get('output_name', '')))})")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=60,
    )
    err_console.print(panel)


def print_colors(rows: list[dict]) -> None:
    """Print how each color token resolves.

    Each dict has: token, normalized (str|None), fill (str|None), text (fg color).
    """
    table = Table(
        title="Colors",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Token", style="bold")
    table.add_column("Normalized")
    table.add_column("SVG fill")
    table.add_column("Text")
    table.add_column("", width=4)

    for row in rows:
        normalized = row.get("normalized")
        fill = row.get("fill")
        table.add_row(
            escape(row.get("token", "")),
            escape(normalized) if normalized is not None else "[red]invalid[/]",
            escape(fill or "-"),
            escape(row.get("text", "-")),
            _swatch(fill),
        )

    console.print(table)


def print_config(defaults: dict, path: str) -> None:
    """Print stored badge defaults."""
    if not defaults:
        console.print(f"[grey50]No defaults set in {escape(path)}[/]")
        return
    table = Table(
        title="Badge Defaults",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
        caption=escape(path),
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in sorted(defaults.items()):
        table.add_row(escape(key), escape(str(value)))
    console.print(table)


def print_config_updated(key: str, value: str | None) -> None:
    if value is None:
        console.print(f"[green]Removed default[/] [bold]{escape(key)}[/]")
    else:
        console.print(f"[green]Set default[/] [bold]{escape(key)}[/] = {escape(value)}")


def print_error(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/]")
