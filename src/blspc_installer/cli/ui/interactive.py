"""Interactive menu flows."""

from typing import Callable, Optional

from blspc_installer.cli.ui.base import MenuUI, Session
from blspc_installer.cli.ui.menu import ArrowMenu
from blspc_installer.cli.ui.panels import console
from blspc_installer.cli.ui.session import begin_session
from blspc_installer.utils.config import Config
from blspc_installer.utils.constants import InstallMethod, Messages
from blspc_installer.utils.debug import debug_menu
from blspc_installer.utils.exceptions import WorkflowError

MAIN_OPTIONS = ["Install", "Uninstall", "Exit"]
INSTALL_OPTIONS = ["Download", "Compile", "Compile(Debug)", "Exit"]

# Install menu index -> install method (None = leave)
INSTALL_METHODS: dict[int, Optional[str]] = {
    0: InstallMethod.DOWNLOAD,
    1: InstallMethod.COMPILE,
    2: InstallMethod.DEBUG,
    3: None,
}


def run_install(method: str, config: Config, session: Session) -> None:
    """Run an install method and end the session with its outcome."""
    from blspc_installer.cli.install import compile_and_install

    if method == InstallMethod.DOWNLOAD:
        session.end(Messages.NO_RELEASE)
        return

    try:
        compile_and_install(config, debug=method == InstallMethod.DEBUG)
    except WorkflowError as e:
        console.print(f"[red]Failed:[/red] {e}")
        session.end(Messages.INSTALL_FAILED.format(reason=e))
        return
    session.end(Messages.INSTALLED)


def run_uninstall(config: Config, session: Session) -> None:
    """Remove installed binaries and end the session."""
    from blspc_installer.cli.install import uninstall_binaries

    try:
        uninstall_binaries(config)
    except OSError as e:
        console.print(f"[red]Failed:[/red] {e}")
        session.end(Messages.UNINSTALL_FAILED.format(reason=e))
        return
    session.end(Messages.UNINSTALLED)


def install_menu(menu: MenuUI, config: Config, session: Session) -> None:
    """Nested menu picking how to install."""
    choice = menu.select(INSTALL_OPTIONS)
    method = INSTALL_METHODS.get(choice)
    debug_menu("Install choice", index=choice, method=method)
    if method is None:
        session.end()
        return
    run_install(method, config, session)


def interactive_menu(
    menu: Optional[MenuUI] = None,
    session: Optional[Session] = None,
    config: Optional[Config] = None,
) -> None:
    """Main interactive menu.

    Every branch finishes with session.end(); nothing is drawn after it.
    """
    config = config or Config()
    menu = menu or ArrowMenu(escape_timeout=config.escape_timeout)
    session = session or begin_session()

    actions: dict[int, Callable[[], None]] = {
        0: lambda: install_menu(menu, config, session),
        1: lambda: run_uninstall(config, session),
        2: lambda: session.end(),
    }

    with session:
        try:
            choice = menu.select(MAIN_OPTIONS)
            debug_menu("Main choice", index=choice)
            actions[choice]()
        except EOFError:
            session.end()
