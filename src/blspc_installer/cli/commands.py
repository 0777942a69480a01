"""CLI command handlers."""

import sys

from blspc_installer.cli.install import (
    compile_and_install,
    find_installed,
    uninstall_binaries,
)
from blspc_installer.cli.ui import console
from blspc_installer.utils.config import Config
from blspc_installer.utils.constants import InstallMethod, Messages
from blspc_installer.utils.exceptions import WorkflowError


def cmd_status(args):
    """Show where blspc is installed."""
    config = Config()
    installed = find_installed(config)

    if installed:
        for path in installed:
            print(f"Installed: {path}")
    else:
        print("Installed: no")
    print(f"Repository: {config.repo_url}")
    print(f"Bin dir: {config.bin_dir}")


def cmd_install(args):
    """Install blspc without the menu."""
    if args.method not in InstallMethod.ALL:
        console.print(f"[red]Unknown method:[/red] {args.method}")
        sys.exit(1)

    if args.method == InstallMethod.DOWNLOAD:
        print(Messages.NO_RELEASE)
        return

    config = Config()
    try:
        compile_and_install(config, debug=args.method == InstallMethod.DEBUG)
    except WorkflowError as e:
        console.print(f"[red]Failed:[/red] {e}")
        sys.exit(1)
    print(Messages.INSTALLED)


def cmd_uninstall(args):
    """Remove blspc without the menu."""
    config = Config()
    uninstall_binaries(config)
    print(Messages.UNINSTALLED)
