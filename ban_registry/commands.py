import click

from .app import app
from .errors import BanRegistryError
from .registry import get_registry


def fail(e):
	click.echo(click.style(str(e), fg="red"), err=True)
	raise SystemExit(1)


@app.cli.command("ban")
@click.argument("player_id")
@click.argument("reason")
@click.argument("duration", type=click.IntRange(min=1))
def ban(player_id, reason, duration):
	"""Ban PLAYER_ID for DURATION minutes.

	The server keeps the ban list in memory, so only use this while
	the server is stopped.
	"""
	try:
		record = get_registry().ban(player_id, reason, duration)
	except BanRegistryError as e:
		fail(e)

	click.echo(click.style(f"Banned {record.player_id} until {record.expires_at.isoformat()}", fg="green"))


@app.cli.command("revoke")
@click.argument("player_id")
def revoke(player_id):
	"""Lift the ban of PLAYER_ID.

	Like ban, only use this while the server is stopped.
	"""
	try:
		get_registry().revoke(player_id)
	except BanRegistryError as e:
		fail(e)

	click.echo(click.style(f"Revoked ban of {player_id}", fg="green"))


@app.cli.command("list-bans")
def list_bans():
	"""List active bans."""
	for record in get_registry().list_active():
		click.echo(f"{record.player_id}\t{record.expires_at.isoformat()}\t{record.reason}")


@app.cli.command("sweep")
def sweep():
	"""Remove expired bans from the ban list file."""
	removed = get_registry().sweep()
	click.echo(click.style(f"Removed {removed} expired bans", fg="green"))
