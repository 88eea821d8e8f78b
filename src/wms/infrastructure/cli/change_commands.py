"""Session commands for pending price changes."""

from __future__ import annotations

import click

from wms.application.drain_changes import DrainChangesHandler
from wms.infrastructure.bootstrap import LedgerSession


@click.command("changes")
@click.pass_obj
def changes_drain(session: LedgerSession) -> None:
    """Print and clear the price changes recorded since the last call."""
    events = DrainChangesHandler(session.warehouse).handle()

    if not events:
        click.echo("No pending changes.")
        return
    for event in events:
        click.echo(
            f"{event.id}  {event.name} ({event.category}): "
            f"{event.old_price} -> {event.new_price}"
        )
