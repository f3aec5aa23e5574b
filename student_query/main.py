from __future__ import annotations

import json
import sys
import uuid
from pathlib import Path
from typing import Optional

import typer

from student_query.config import get_settings
from student_query.orchestrator import InboundRequest, RequestHandler
from student_query.queries import available_queries
from student_query.reporter import render_response
from student_query.utils.logging import configure_logging

app = typer.Typer(help="Student query handler CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} "
        f"log_events={settings.log_events} profile_queries={settings.profile_queries}"
    )


@app.command()
def queries() -> None:
    """
    List the queries evaluated for every request.
    """
    typer.echo("Available queries: " + ", ".join(available_queries()))


@app.command()
def invoke(
    body_file: Optional[Path] = typer.Argument(
        None,
        help="File holding the JSON request body. Reads stdin when omitted or '-'.",
    ),
    request_id: Optional[str] = typer.Option(
        None,
        "--request-id",
        "-k",
        help="Idempotency key for the request (default: a random identifier).",
    ),
    repeat: int = typer.Option(
        1,
        "--repeat",
        "-n",
        min=1,
        help="Send the same request this many times through one handler.",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Render responses as tables instead of raw JSON.",
    ),
) -> None:
    """
    Run a request body through the handler and print the response.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if body_file is None or str(body_file) == "-":
        body = sys.stdin.read()
    else:
        body = body_file.read_text(encoding="utf-8")

    handler = RequestHandler(settings=settings)
    request = InboundRequest(
        body=body,
        request_id=request_id,
        invocation_id=f"cli-{uuid.uuid4()}",
    )

    for _ in range(repeat):
        response = handler.handle(request)
        if table:
            render_response(response)
        else:
            typer.echo(json.dumps(response, indent=2))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
