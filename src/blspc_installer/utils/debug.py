"""Debug logging utility."""

from datetime import datetime

from blspc_installer.utils.config import Config, get_installer_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_installer_dir())
    return _config


def reload_config():
    """Reload config (call after BLSPC_* environment changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Only the log file is written: stderr shares the screen with the menu.

    Args:
        category: Category like 'menu', 'session', 'workflow'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[blspc:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_menu(message: str, **kwargs):
    """Log menu-related debug message."""
    debug("menu", message, **kwargs)


def debug_session(message: str, **kwargs):
    """Log session-related debug message."""
    debug("session", message, **kwargs)


def debug_workflow(message: str, **kwargs):
    """Log workflow-related debug message."""
    debug("workflow", message, **kwargs)
