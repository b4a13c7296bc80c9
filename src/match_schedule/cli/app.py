from __future__ import annotations

import typer

from match_schedule.cli.priorities import app as priorities_app
from match_schedule.cli.schedule import app as schedule_app
from match_schedule.cli.serve import serve_cmd
from match_schedule.core.config import settings
from match_schedule.core.logging_setup import configure_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(schedule_app, name="schedule")
app.add_typer(priorities_app, name="priorities")
app.command("serve")(serve_cmd)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level)
