from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from student_query.orchestrator import HandlerResponse


def _format_value(value: Any) -> str:
    if isinstance(value, Mapping):
        return f"{value.get('name')}: {value.get('result')}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_values(values: List[Any]) -> str:
    if not values:
        return "[dim]-[/dim]"
    return escape(", ".join(_format_value(v) for v in values))


def build_results_table(results: Mapping[str, List[Any]]) -> Table:
    """
    Build a table with one row per query: name, match count and values.
    """
    table = Table(
        title="Student Query Results",
        box=box.ROUNDED,
    )

    table.add_column("Query", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right", style="magenta")
    table.add_column("Values", style="green")

    for name, values in results.items():
        table.add_row(name, str(len(values)), _format_values(values))
    return table


def render_results(results: Mapping[str, List[Any]], console: Optional[Console] = None) -> None:
    """
    Pretty-print a QueryResultSet.
    """
    console = console or Console()
    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return
    console.print(build_results_table(results))


def render_response(response: HandlerResponse, console: Optional[Console] = None) -> None:
    """
    Pretty-print a handler response.

    Successful query runs are rendered as a results table; every other response
    (errors, duplicate notices) is shown as its status line and JSON body.
    """
    console = console or Console()
    status = response.get("statusCode", 0)
    body = json.loads(response.get("body") or "null")

    style = "green" if status < 400 else "red"
    console.print(f"[{style}]Status {status}[/{style}]")

    if status == 200 and isinstance(body, dict) and "message" not in body:
        render_results(body, console=console)
        return

    if isinstance(body, dict) and body.get("details"):
        table = Table(title=body.get("error", "Invalid input"), box=box.ROUNDED)
        table.add_column("Path", style="cyan")
        table.add_column("Code", style="magenta")
        table.add_column("Message", style="red")
        for violation in body["details"]:
            path = ".".join(str(part) for part in violation.get("path", [])) or "<body>"
            table.add_row(
                escape(path), violation.get("code", ""), escape(violation.get("message", ""))
            )
        console.print(table)
        return

    console.print_json(data=body)


__all__ = ["build_results_table", "render_results", "render_response"]
