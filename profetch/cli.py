"""Command-line interface for profetch."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from profetch import ProfileFetcher, FetcherConfig, Profile, save_json, to_json, __version__
from profetch.exceptions import ConfigError, ErrorKind

app = typer.Typer(
    name="profetch",
    help="Fetch the authenticated user's profile",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

EXIT_CODES = {
    ErrorKind.TRANSPORT: 2,
    ErrorKind.INVALID_RESPONSE: 3,
    ErrorKind.MISSING_DATA: 4,
    ErrorKind.DECODING_FAILED: 5,
    ErrorKind.INVALID_REQUEST: 6,
}


def version_callback(value: bool):
    if value:
        console.print(f"profetch version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """profetch - authenticated user profile client."""
    pass


def _build_config(**overrides) -> FetcherConfig:
    """Create FetcherConfig from environment plus non-None CLI overrides."""
    try:
        return FetcherConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        raise ConfigError(str(e)) from e


@app.command()
def me(
    token: str = typer.Option(
        ..., "--token", "-t", envvar="PROFETCH_TOKEN", help="Bearer token"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", "-b", help="API base URL (overrides PROFETCH_BASE_URL)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save profile JSON to this file"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print profile as JSON instead of a table"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only log errors"
    ),
):
    """Fetch the profile for TOKEN and print it."""
    try:
        config = _build_config(
            base_url=base_url,
            timeout_seconds=timeout,
            log_level="ERROR" if quiet else None,
        )
    except ConfigError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    async def run():
        async with ProfileFetcher(config) as fetcher:
            return await fetcher.fetch_outcome(token)

    outcome = asyncio.run(run())

    if not outcome.success:
        err_console.print(f"[red]✗[/red] Failed to fetch profile ({outcome.kind.value}): {outcome.error}")
        raise typer.Exit(EXIT_CODES.get(outcome.kind, 1))

    profile = outcome.profile
    if as_json:
        typer.echo(to_json(profile))
    else:
        _print_profile_table(profile)

    if output:
        saved = save_json(profile, output)
        err_console.print(f"[dim]Saved to {saved}[/dim]")


@app.command()
def config():
    """Show the effective configuration."""
    try:
        cfg = _build_config()
    except ConfigError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="profetch configuration", show_header=False)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Profile URL", cfg.profile_url)
    table.add_row("Timeout", f"{cfg.timeout_seconds}s")
    table.add_row("User agent", cfg.user_agent or "-")
    table.add_row("Log level", cfg.log_level)
    table.add_row("Log format", cfg.log_format.value)

    console.print(table)


def _print_profile_table(profile: Profile):
    """Print profile as table."""
    table = Table(title=profile.name, show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("ID", profile.id)
    table.add_row("Name", profile.name)
    table.add_row("Email", profile.email or "-")
    table.add_row("Avatar", profile.avatar_url or "-")

    console.print(table)


if __name__ == "__main__":
    app()
