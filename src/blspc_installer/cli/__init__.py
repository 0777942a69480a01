"""CLI entry point for blspc-installer.

Uses Typer for command routing with lazy loading.
Running without a command opens the interactive menu.
"""

import sys
from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="blspc-installer",
    help="Interactive installer for the blspc compiler",
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from blspc_installer import __version__

        print(f"blspc-installer version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Print version information and exit.",
    ),
) -> None:
    """Launch interactive menu if no command given."""
    if ctx.invoked_subcommand is None:
        # Lazy load UI - only when interactive
        from blspc_installer.cli.ui.interactive import interactive_menu

        interactive_menu()


@app.command()
def status() -> None:
    """Show where blspc is installed."""
    from blspc_installer.cli.commands import cmd_status

    cmd_status(None)


@app.command("install")
def install_cmd(
    method: str = typer.Option(
        "compile", "--method", help="download, compile or debug"
    ),
) -> None:
    """Install blspc without the menu."""
    from blspc_installer.cli.commands import cmd_install

    class Args:
        def __init__(self):
            self.method = method

    cmd_install(Args())


@app.command("uninstall")
def uninstall_cmd() -> None:
    """Remove installed blspc binaries."""
    from blspc_installer.cli.commands import cmd_uninstall

    cmd_uninstall(None)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    from blspc_installer.utils.exceptions import ConfigurationError

    try:
        app()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
