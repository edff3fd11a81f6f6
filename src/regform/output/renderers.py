"""Human-readable rendering of ServiceResult.

Each op can register a renderer with ``@_renders("op")``; anything else
falls back to a plain ``key: value`` listing.  Failures share one
renderer, which lays out form errors as a field table.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from regform.domain.types import FieldState
from regform.output.console import create_console, get_output, style_for_state

if TYPE_CHECKING:
    from rich.console import Console

    from regform.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console"], None]
_RENDERERS: dict[str, _Renderer] = {}

# Values pulled out of ``data`` for ``--quiet``; other ops print "OK: <op>".
_QUIET_KEYS = {"age": "age", "counter": "label"}

_SLOW_SPAN_MS = 100.0


def _renders(*ops: str) -> Callable[[_Renderer], _Renderer]:
    def register(fn: _Renderer) -> _Renderer:
        for op in ops:
            _RENDERERS[op] = fn
        return fn

    return register


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as plain text (styled only on a real terminal)."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_fields)(result, console)
    else:
        _render_failure(result, console)
    if verbose and result.meta:
        _render_meta(result.meta, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the essential value, or the error."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    key = _QUIET_KEYS.get(result.op)
    if key is not None:
        return str(result.data.get(key, ""))
    return f"OK: {result.op}"


def _heading(console: Console, label: str, style: str, op: str, *rest: Any) -> None:
    console.print(Text(label, style=style), Text(f"  {op}", style="rf.op"), *rest)


def _pairs(console: Console, items: Mapping[str, Any], *, skip: tuple[str, ...] = ()) -> None:
    for key, value in items.items():
        if key in skip:
            continue
        value_style = "rf.field" if key == "field" else "rf.value"
        console.print(Text.assemble((f"  {key}: ", "rf.key"), (str(value), value_style)))


def _field_table(values: Mapping[str, Any], errors: Mapping[str, str] | None = None) -> Table:
    """Field/value table, with an error column when *errors* is given."""
    table = Table(pad_edge=False)
    table.add_column("Field", style="rf.field", no_wrap=True)
    table.add_column("Value")
    if errors is not None:
        table.add_column("Error", style=style_for_state(FieldState.INVALID))
    for name, value in values.items():
        cells = [name, str(value)]
        if errors is not None:
            cells.append(errors.get(name, ""))
        table.add_row(*cells)
    return table


def _span_tree(span: Mapping[str, Any], tree: Tree | None = None) -> Tree:
    duration = float(span.get("duration_ms", 0.0))
    style = "yellow" if duration > _SLOW_SPAN_MS else "dim"
    label = Text.assemble((f"{duration:8.2f}ms", style), f"  {span.get('name', '?')}")
    node = Tree(label) if tree is None else tree.add(label)
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_meta(meta: Mapping[str, Any], console: Console) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry" and isinstance(value, Mapping):
            console.print(_span_tree(value))
        else:
            console.print(f"    {key}: {value}")


def _render_fields(result: ServiceResult, console: Console) -> None:
    _heading(console, "OK", "rf.ok", result.op)
    _pairs(console, result.data)


@_renders("validate")
def _render_validate(result: ServiceResult, console: Console) -> None:
    _heading(console, "OK", "rf.ok", result.op)
    console.print(
        Text(f"  {result.data.get('field', '')}", style="rf.field"),
        Text(f"  {FieldState.VALID}", style=style_for_state(FieldState.VALID)),
    )


@_renders("submit", "register", "show")
def _render_record(result: ServiceResult, console: Console) -> None:
    _heading(console, "OK", "rf.ok", result.op)
    _pairs(console, result.data, skip=("record",))
    record = result.data.get("record")
    if isinstance(record, Mapping):
        console.print(_field_table(record))


@_renders("counter")
def _render_counter(result: ServiceResult, console: Console) -> None:
    console.print(Text(str(result.data.get("label", "")), style="rf.field"))


def _render_failure(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    _heading(console, "ERROR", "rf.error", result.op, Text(" — "), message)
    if error is None:
        return
    field_errors = error.detail.get("errors")
    if isinstance(field_errors, Mapping) and field_errors:
        values = error.detail.get("values")
        if not isinstance(values, Mapping):
            values = dict.fromkeys(field_errors, "")
        console.print(_field_table(values, field_errors))
    _pairs(console, error.detail, skip=("errors", "values"))
