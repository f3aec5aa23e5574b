"""
Sample payload generator for the student query handler.

Implements deterministic pseudo-random student record generation and writes a
request body that can be fed to `student-query invoke`.
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any

import typer

app = typer.Typer(help="Generate synthetic student query request bodies.")

FIRST_NAMES = ["Ana", "Bruno", "Chen", "Dara", "Emeka", "Farah", "Goran", "Hana", "Ivo", "Jun"]


def _random_mark(rng: random.Random) -> int:
    # ~10% perfect marks, ~5% zeros.
    roll = rng.random()
    if roll < 0.1:
        return 100
    if roll < 0.15:
        return 0
    return rng.randint(1, 99)


def _generate_records(rows: int, seed: int) -> list[dict[str, Any]]:
    rng = random.Random(seed)
    records: list[dict[str, Any]] = []
    for i in range(rows):
        science = _random_mark(rng)
        maths = _random_mark(rng)
        records.append(
            {
                "name": f"{rng.choice(FIRST_NAMES)} {i + 1}",
                "Subject": {
                    "science": science,
                    "maths": maths,
                    "result": "pass" if (science + maths) / 2 >= 40 else "fail",
                },
                "Attendance": rng.randint(0, 100),
            }
        )
    return records


def _generate_payload(rows: int, seed: int) -> dict[str, Any]:
    return {"result": _generate_records(rows, seed)}


@app.command()
def main(
    rows: int = typer.Option(
        10,
        "--rows",
        "-r",
        min=0,
        help="Number of student records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional output path (if omitted, the body is printed to stdout).",
    ),
) -> None:
    """
    Generate a request body with synthetic student records.
    """
    body = json.dumps(_generate_payload(rows, seed), indent=2)
    if output is None:
        typer.echo(body)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(body + "\n", encoding="utf-8")
    typer.echo(f"Wrote {rows:,} records -> {output} (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
