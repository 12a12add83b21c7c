"""CLI commands for dropx."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dropx import __logo__, __version__

app = typer.Typer(
    name="dropx",
    help=f"{__logo__} dropx - Dropbox OAuth token helper",
    no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


def _fail(exc: BaseException) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise typer.Exit(1)


def _print_plain(text: str) -> None:
    # URLs and tokens must reach the terminal unwrapped and unstyled.
    console.print(text, soft_wrap=True, markup=False, highlight=False)


def _acquire_token(config_path: Path | None) -> str:
    """Load the config and run the cached-refresh-or-interactive token flow."""
    from dropx.auth import get_access_token
    from dropx.config import load_config

    try:
        config = load_config(config_path)
        return get_access_token(
            config,
            on_auth=_print_plain,
            on_prompt=lambda prompt: typer.prompt(prompt, default="", show_default=False),
            on_status=console.print,
        )
    except (RuntimeError, OSError) as exc:
        _fail(exc)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} dropx v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", "-c", help="Path to the JSON config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True
    ),
):
    """Print a Dropbox access token, logging in or refreshing as needed."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    ctx.obj = {"config": config}
    if ctx.invoked_subcommand is not None:
        return

    access_token = _acquire_token(config)
    _print_plain(f"Access token {access_token}")


# ============================================================================
# Files
# ============================================================================


def _format_size(size: int | None) -> str:
    if size is None:
        return ""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024:
            break
        value /= 1024
    else:
        unit = "TB"
    return f"{int(value)} B" if unit == "B" else f"{value:.1f} {unit}"


@app.command("ls")
def list_files(
    ctx: typer.Context,
    path: str = typer.Argument("", help="Remote folder, e.g. /Photos"),
):
    """List the files in a remote folder."""
    from dropx.files import list_folder

    access_token = _acquire_token(ctx.obj["config"])
    try:
        entries = list_folder(access_token, path)
    except RuntimeError as exc:
        _fail(exc)

    if not entries:
        console.print("No files.")
        return

    table = Table(title=path or "/")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Size", justify="right")

    for entry in sorted(entries, key=lambda e: (not e.is_folder, e.name.lower())):
        name = f"{entry.name}/" if entry.is_folder else entry.name
        table.add_row(escape(name), entry.tag, _format_size(entry.size))

    console.print(table)


# ============================================================================
# Status / Logout
# ============================================================================


@app.command()
def status(ctx: typer.Context):
    """Show dropx status."""
    from dropx.auth import get_cache_file
    from dropx.config import get_config_path

    config_path = get_config_path(ctx.obj["config"])

    console.print(f"{__logo__} dropx Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[red]✗[/red]'}")
    try:
        cache_file = get_cache_file()
    except RuntimeError as exc:
        console.print(f"Refresh token: [red]{escape(str(exc))}[/red]")
        return
    console.print(f"Refresh token: {cache_file} {'[green]✓[/green]' if cache_file.exists() else '[dim]not cached[/dim]'}")


@app.command()
def logout():
    """Remove the cached refresh token."""
    from dropx.auth import clear_refresh_token

    try:
        removed = clear_refresh_token()
    except (RuntimeError, OSError) as exc:
        _fail(exc)

    if removed:
        console.print("[green]✓[/green] Removed cached refresh token")
    else:
        console.print("No cached refresh token.")


if __name__ == "__main__":
    app()
