"""Flask CLI commands for refresh token ledger maintenance."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from catalog.api.deps import get_ledger

LOGGER = logging.getLogger(__name__)


@click.group("ledger")
def ledger_cli() -> None:
    """Refresh token ledger maintenance commands."""


@ledger_cli.command("purge-expired")
@with_appcontext
def purge_expired() -> None:
    """Delete ledger rows whose expiry has passed."""
    removed = get_ledger().purge_expired()
    LOGGER.info("ledger.purged", extra={"event": "ledger.purged", "status": removed})
    click.echo(f"Purged {removed} expired refresh token(s).")
