"""Configuration management."""

import os
from pathlib import Path
from typing import Optional

from blspc_installer.utils.constants import (
    DEFAULT_BINARY_NAME,
    DEFAULT_ESCAPE_TIMEOUT,
    DEFAULT_REPO_URL,
    DEFAULT_UNINSTALL_BINARIES,
    DEFAULT_UNINSTALL_PAUSE,
    ENV_PREFIX,
)
from blspc_installer.utils.exceptions import ConfigurationError


def get_installer_dir() -> Path:
    """Get the installer data directory (XDG-compliant)."""
    if env_dir := os.environ.get("BLSPC_INSTALLER_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "blspc-installer"


class Config:
    """Installer settings.

    Defaults are overridden by BLSPC_* environment variables only;
    nothing is read from disk.
    """

    def __init__(self, installer_dir: Optional[Path] = None):
        self.installer_dir = installer_dir or get_installer_dir()
        self._load()

    def _load(self):
        """Set defaults, then apply environment overrides."""
        home = Path.home()

        self.repo_url = DEFAULT_REPO_URL
        self.cache_dir = home / ".cache"
        self.bin_dir = home / "bin"
        self.system_bin_dir = Path("/usr/bin")
        self.binary_name = DEFAULT_BINARY_NAME
        self.uninstall_binaries = DEFAULT_UNINSTALL_BINARIES.split(",")
        self.uninstall_pause = DEFAULT_UNINSTALL_PAUSE
        self.escape_timeout = DEFAULT_ESCAPE_TIMEOUT
        self.debug = False

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply shell BLSPC_* vars, converted by the type of the default."""
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            attr_name = key[len(ENV_PREFIX) :].lower()
            if attr_name.startswith("_") or not hasattr(self, attr_name):
                continue
            current = getattr(self, attr_name)
            if isinstance(current, bool):
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif isinstance(current, float):
                try:
                    setattr(self, attr_name, float(value))
                except ValueError:
                    raise ConfigurationError(
                        f"{key} must be a number, got {value!r}"
                    ) from None
            elif isinstance(current, Path):
                setattr(self, attr_name, Path(value).expanduser())
            elif isinstance(current, list):
                setattr(
                    self, attr_name, [v.strip() for v in value.split(",") if v.strip()]
                )
            else:
                setattr(self, attr_name, value)

    @property
    def checkout_dir(self) -> Path:
        """Path the repository is cloned into."""
        name = self.repo_url.rstrip("/").rsplit("/", 1)[-1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        return self.cache_dir / name

    @property
    def log_path(self) -> Path:
        """Path to debug log."""
        return self.installer_dir / "debug.log"

    def install_path(self) -> Path:
        """Where the compiled binary is placed."""
        return self.bin_dir / self.binary_name
