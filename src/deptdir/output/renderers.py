"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``. Every line is printed with
``soft_wrap`` so long names are never folded across lines.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from deptdir.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from deptdir.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    confirm_inserts: bool = False,
) -> str:
    """Render a ServiceResult as line-oriented text.

    Returns an empty string when the operation has nothing to show,
    such as a silent insert.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, confirm_inserts=confirm_inserts)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_json(result: ServiceResult) -> str:
    """One compact JSON object per result, suitable for line-oriented consumers."""
    return result.model_dump_json()


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, text: str, style: str = "") -> None:
    console.print(Text(text, style=style), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    _line(console, err.message if err else "Unknown error")

    if verbose and err and err.detail:
        for k, v in err.detail.items():
            console.print(Text.assemble((f"  {k}: ", "dept.key"), str(v)), soft_wrap=True)


# ── Operation renderers ───────────────────────────────────────────────


def _render_insert(result: ServiceResult, console: Console, **opts: Any) -> None:
    if not opts.get("confirm_inserts"):
        return
    data = result.data
    _line(console, f"Added {data['employee']} to {data['department']}", "dept.ok")


def _render_department(result: ServiceResult, console: Console, **_opts: Any) -> None:
    for name in result.data.get("employees", []):
        _line(console, name, "dept.employee")


def _render_all(result: ServiceResult, console: Console, **_opts: Any) -> None:
    for department, employees in result.data.get("departments", {}).items():
        _line(console, f"{department}:", "dept.department")
        for name in employees:
            _line(console, name, "dept.employee")


def _render_generic(result: ServiceResult, console: Console, **_opts: Any) -> None:
    for key, value in result.data.items():
        console.print(Text.assemble((f"{key}: ", "dept.key"), str(value)), soft_wrap=True)


_OP_RENDERERS: dict[str, Renderer] = {
    "insert_employee": _render_insert,
    "list_department": _render_department,
    "list_all": _render_all,
}
