"""Install and uninstall workflows for blspc."""

import shutil
import subprocess
import time
from pathlib import Path

from blspc_installer.cli.ui import console
from blspc_installer.utils.config import Config
from blspc_installer.utils.debug import debug_workflow
from blspc_installer.utils.exceptions import WorkflowError


def _run(cmd: list[str], cwd: Path, step: str):
    """Run a build tool, letting its output reach the terminal."""
    debug_workflow("Running", step=step, cmd=" ".join(cmd), cwd=cwd)
    try:
        subprocess.run(cmd, cwd=cwd, check=True)
    except subprocess.CalledProcessError as e:
        raise WorkflowError(
            f"{' '.join(cmd)} exited with status {e.returncode}", step=step
        ) from e
    except FileNotFoundError as e:
        raise WorkflowError(f"{cmd[0]} not found", step=step) from e


def prepare_folders(config: Config):
    """Create the cache dir and drop any previous checkout."""
    console.print("Setting up folders...")
    try:
        config.cache_dir.mkdir(parents=True, exist_ok=True)
        if config.checkout_dir.exists():
            shutil.rmtree(config.checkout_dir)
    except OSError as e:
        raise WorkflowError(
            f"could not prepare {config.cache_dir}: {e}", step="prepare"
        ) from e


def clone_repository(config: Config):
    """Clone the upstream repository into the cache dir."""
    console.print("Cloning repository...")
    _run(
        ["git", "clone", config.repo_url, str(config.checkout_dir)],
        cwd=config.cache_dir,
        step="clone",
    )


def build_binary(config: Config, debug: bool = False) -> Path:
    """Compile the checkout, return the path of the produced binary."""
    console.print("Compiling...")
    cmd = ["cargo", "build"] if debug else ["cargo", "build", "--release"]
    _run(cmd, cwd=config.checkout_dir, step="build")

    profile = "debug" if debug else "release"
    return config.checkout_dir / "target" / profile / config.binary_name


def place_binary(config: Config, built: Path) -> Path:
    """Move the built binary into the bin dir."""
    if not built.exists():
        raise WorkflowError(f"build produced no {built}", step="install")

    destination = config.install_path()
    try:
        config.bin_dir.mkdir(parents=True, exist_ok=True)
        shutil.move(str(built), str(destination))
    except OSError as e:
        raise WorkflowError(f"could not move binary: {e}", step="install") from e
    console.print(f"  [green]✓[/green] {destination}")
    return destination


def compile_and_install(config: Config, debug: bool = False) -> Path:
    """Clone, build and install blspc.

    Args:
        config: Installer settings
        debug: Build the debug profile instead of release

    Returns:
        Path of the installed binary

    Raises:
        WorkflowError: Any step failed
    """
    prepare_folders(config)
    clone_repository(config)
    built = build_binary(config, debug=debug)
    installed = place_binary(config, built)
    debug_workflow("Installed", path=installed, debug=debug)
    return installed


def uninstall_binaries(config: Config) -> list[Path]:
    """Remove installed binaries from the user and system bin dirs.

    Missing files are ignored; files that can't be removed are reported
    and skipped.

    Returns:
        Paths that were removed
    """
    removed = []
    for name in config.uninstall_binaries:
        console.print(f"Uninstalling {name}...")
        for directory in (config.bin_dir, config.system_bin_dir):
            path = directory / name
            # Dangling symlinks count too
            if not (path.exists() or path.is_symlink()):
                continue
            try:
                path.unlink()
            except OSError as e:
                console.print(f"[yellow]Warning:[/yellow] could not remove {path}: {e}")
                continue
            removed.append(path)
            console.print(f"  [green]✓[/green] removed {path}")
        time.sleep(config.uninstall_pause)
    debug_workflow("Uninstalled", removed=len(removed))
    return removed


def find_installed(config: Config) -> list[Path]:
    """Return locations where the binary is currently installed."""
    candidates = [config.install_path(), config.system_bin_dir / config.binary_name]
    return [path for path in candidates if path.exists()]
