"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from framedeps.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from framedeps.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one item per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="fd.ok")
    op = Text(f"  {result.op}", style="fd.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fd.key")
    style = "fd.path" if key in ("path", "root", "executable") else ""
    console.print(k, Text(str(value), style=style), sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _numbered_table(items: list[Any], *, header: str, style: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="fd.index", justify="right")
    table.add_column(header, style=style)
    for index, item in enumerate(items, start=1):
        table.add_row(str(index), str(item))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fd.error")
    op = Text(f"  {result.op}", style="fd.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Operation renderers ───────────────────────────────────────────────


def _render_order(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Build order as a numbered table."""
    _status_line(console, result)
    nodes = result.data.get("nodes") or []
    if nodes:
        _field(console, "nodes", ", ".join(nodes))
    items = result.data.get("items", [])
    if items:
        console.print(_numbered_table(items, header="Dependency", style="fd.name"))
    console.print(f"\n{result.data.get('count', len(items))} dependencies")
    if verbose:
        _render_meta(console, result)


def _render_input_files(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Inferred frameworks, followed by unresolved names when verbose."""
    _status_line(console, result)
    _field(console, "root", result.data.get("root", ""))
    _field(console, "platform", result.data.get("platform", ""))
    items = result.data.get("items", [])
    for item in items:
        console.print(Text(f"  {item}", style="fd.path"))
    console.print(f"\n{result.data.get('count', len(items))} frameworks")

    if verbose:
        for path in result.data.get("search_paths", []):
            _field(console, "search path", path)
        unresolved = result.data.get("unresolved", [])
        if unresolved:
            _field(console, "unresolved", ", ".join(unresolved))
        _render_meta(console, result)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Plain list results (search paths, linked names, archived paths)."""
    _status_line(console, result)
    for key in ("platform", "executable", "path"):
        if key in result.data:
            _field(console, key, result.data[key])
    for item in result.data.get("items", []):
        console.print(Text(f"  {item}"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "order": _render_order,
    "input_files": _render_input_files,
    "search_paths": _render_list,
    "links": _render_list,
    "archive": _render_list,
    "unarchive": _render_list,
}
