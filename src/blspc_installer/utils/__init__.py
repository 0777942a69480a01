"""Utilities for blspc-installer."""

from blspc_installer.utils.config import Config, get_installer_dir
from blspc_installer.utils.exceptions import (
    ConfigurationError,
    InstallerError,
    InvalidArgumentError,
    WorkflowError,
)

__all__ = [
    "Config",
    "get_installer_dir",
    "ConfigurationError",
    "InstallerError",
    "InvalidArgumentError",
    "WorkflowError",
]
