"""Human, quiet and JSON renderings of a ServiceResult.

List results (``data["items"]``) render as a Rich table, failures render
the error code, message and every validation issue with its path.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from peashoot.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from peashoot.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


_TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "list_items": ("id", "displayName", "variant", "category", "size"),
    "list_packets": ("id", "name", "category", "expiresAt"),
    "list_locations": ("id", "name", "region", "country"),
}


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_table(console: Console, op: str, items: list[Any]) -> None:
    columns = _TABLE_COLUMNS.get(op)
    if columns is None:
        first = items[0] if items and isinstance(items[0], dict) else {}
        columns = tuple(first)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    for column in columns:
        table.add_column(column, style="pea.id" if column == "id" else None)
    for item in items:
        row = item if isinstance(item, dict) else {}
        table.add_row(*(_cell(row.get(column, "")) for column in columns))
    console.print(table)


def _render_ok(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pea.ok"), Text(f"  {result.op}", style="pea.op"), sep="")
    items = result.data.get("items")
    for key, value in result.data.items():
        if key == "items" and isinstance(items, list):
            continue
        style = "pea.date" if key == "date" else ("pea.id" if key == "id" else None)
        console.print(
            Text(f"  {key}: ", style="pea.key"), Text(_cell(value), style=style or ""), sep=""
        )
    if isinstance(items, list) and items:
        _render_table(console, result.op, items)


def _render_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(Text("ERROR", style="pea.error"), Text(f"  {result.op}: {message}"), sep="")
    if error is None:
        return
    for issue in error.detail.get("issues", []):
        console.print(
            Text("  - ", style="pea.key"),
            Text(issue.get("path") or "<root>", style="pea.path"),
            Text(f": {issue.get('message', '')}"),
            sep="",
        )
    if verbose:
        console.print(Text(f"  code: {error.code} (status {error.status})", style="pea.key"))


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: ids for list results, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items if isinstance(item, dict))
    if "date" in result.data:
        return str(result.data["date"])
    return f"OK: {result.op}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    console = create_console()
    if result.ok:
        _render_ok(console, result)
    else:
        _render_error(console, result, verbose=settings.verbose)
    return get_output(console).rstrip("\n")
