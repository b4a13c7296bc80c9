from __future__ import annotations

import logging

import typer
import uvicorn

from match_schedule.api.app import create_app
from match_schedule.cli.common import open_priority_store, service_scope


def uvicorn_log_level() -> str:
    """Level configured by the root `--log-level` option, in uvicorn's spelling."""

    return logging.getLevelName(logging.getLogger().getEffectiveLevel()).lower()


def serve_cmd(
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to bind."),
    port: int = typer.Option(3000, "--port", envvar="PORT", help="Port to listen on."),
) -> None:
    """Serve the schedule and toggle endpoints over HTTP."""

    store = open_priority_store()
    with service_scope(store) as service:
        app = create_app(service, store)
        uvicorn.run(app, host=host, port=port, log_level=uvicorn_log_level())
