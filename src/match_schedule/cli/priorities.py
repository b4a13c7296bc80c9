from __future__ import annotations

import json

import typer

from match_schedule.cli.common import open_priority_store
from match_schedule.priorities.store import PriorityStoreError

app = typer.Typer(help="Manage prioritized events and tags.")


@app.command("list")
def list_priorities_cmd() -> None:
    """Print the persisted priority document."""

    store = open_priority_store()
    typer.echo(json.dumps(store.snapshot().to_document(), ensure_ascii=False, indent=2))


@app.command("toggle-event")
def toggle_event_cmd(
    event_id: str = typer.Option(..., "--id", help="Upstream event id (e.g. 2052711)."),
) -> None:
    """Add or remove an event from the priority set."""

    store = open_priority_store()
    try:
        event_ids = store.toggle_event_priority(event_id)
    except PriorityStoreError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    state = "prioritized" if event_id in event_ids else "unprioritized"
    typer.echo(f"Event {event_id} {state}: event_ids={len(event_ids)}")


@app.command("toggle-tag")
def toggle_tag_cmd(
    event_id: str = typer.Option(..., "--id", help="Upstream event id."),
    tag: str = typer.Option(..., "--tag", help="Tag to add or remove."),
) -> None:
    """Add or remove a tag on an event."""

    store = open_priority_store()
    try:
        tags = store.toggle_tag(event_id, tag)
    except PriorityStoreError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"Event {event_id} tags: {', '.join(tags) if tags else '(none)'}")
