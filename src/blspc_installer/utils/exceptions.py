"""Custom exceptions for blspc-installer.

This module defines a hierarchy of exceptions for different error types:
- InstallerError: Base exception for all installer errors
- InvalidArgumentError: Structurally invalid menu construction
- WorkflowError: Install/uninstall shell-out failures (with the failed step)
- ConfigurationError: Unusable environment overrides
"""

from typing import Optional


class InstallerError(Exception):
    """Base exception for all installer errors.

    All installer-specific exceptions inherit from this class, allowing
    callers to catch all installer errors with a single except clause.
    """

    pass


class InvalidArgumentError(InstallerError, ValueError):
    """Invalid arguments passed to the menu engine.

    Raised before any terminal state is touched, such as:
    - An empty options list
    - An initial index outside the options range
    """

    pass


class WorkflowError(InstallerError):
    """Install or uninstall workflow errors.

    Attributes:
        step: Optional name of the step that failed (e.g. "clone")
    """

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.step = step


class ConfigurationError(InstallerError):
    """Configuration related errors.

    Raised when a BLSPC_* environment override cannot be converted
    to the type of the setting it overrides.
    """

    pass
