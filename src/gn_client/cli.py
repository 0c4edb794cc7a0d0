"""GeoNetwork command-line interface."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from gn_client.exceptions import GNError
from gn_client.factory import create_client_from_settings
from gn_client.settings import GeoNetworkSettings
from gn_client.testing.verifier import remove_all_metadata
from gn_client.versions import GNVersion

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="gn")
@click.option("--url", "service_url", help="GeoNetwork base URL")
@click.option("--user", "username", help="GeoNetwork user")
@click.option("--password", help="GeoNetwork password")
@click.option("--gn-version", "gn_version", type=click.Choice([v.value for v in GNVersion]), help="Server version")
@click.pass_context
def cli(
    ctx: click.Context,
    service_url: str | None,
    username: str | None,
    password: str | None,
    gn_version: str | None,
) -> None:
    """GeoNetwork catalog tools.

    Connection defaults come from GEONETWORK_* environment variables.
    """
    overrides = {
        "service_url": service_url,
        "username": username,
        "password": password,
        "version": gn_version,
    }
    ctx.ensure_object(dict)
    ctx.obj["settings"] = GeoNetworkSettings(**{k: v for k, v in overrides.items() if v is not None})


@cli.command()
@click.pass_context
def ping(ctx: click.Context) -> None:
    """Check that GeoNetwork is reachable with the given credentials."""
    settings: GeoNetworkSettings = ctx.obj["settings"]

    try:
        client = create_client_from_settings(settings)
    except GNError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)

    client.close()
    console.print(f"[green]✓[/green] GeoNetwork {settings.version} at {settings.service_url} is up")


@cli.command()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Delete every metadata record in the catalog.

    Example:
        gn --url http://localhost:8080/geonetwork reset --yes
    """
    settings: GeoNetworkSettings = ctx.obj["settings"]

    if not yes:
        click.confirm(f"Delete ALL metadata in {settings.service_url}?", abort=True)

    try:
        with create_client_from_settings(settings) as client:
            removed = remove_all_metadata(client)
    except GNError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Removed {removed} metadata records")


if __name__ == "__main__":
    cli()
