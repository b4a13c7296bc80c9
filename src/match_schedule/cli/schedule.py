from __future__ import annotations

import json

import typer

from match_schedule.cli.common import service_scope

app = typer.Typer(help="Aggregate and inspect the upcoming schedule.")


@app.command("show")
def show_schedule_cmd(
    days: int | None = typer.Option(
        None,
        "--days",
        help="Window length in days (default: WINDOW_DAYS setting).",
        min=1,
    ),
    compact: bool = typer.Option(
        False,
        "--compact/--pretty",
        help="Print single-line JSON instead of indented JSON.",
    ),
) -> None:
    """Fetch every league and print the windowed schedule as JSON."""

    with service_scope() as service:
        if days is not None:
            service.window_days = days
        result = service.build()

    payload = result.to_dict()
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=None if compact else 2))
