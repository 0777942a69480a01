"""Constants used throughout blspc-installer."""

# Environment variable prefix for setting overrides
ENV_PREFIX = "BLSPC_"

# Upstream repository and produced binary
DEFAULT_REPO_URL = "https://github.com/azur1s/bobbylisp"
DEFAULT_BINARY_NAME = "blspc"
DEFAULT_UNINSTALL_BINARIES = "blspc,trolley"

# Seconds to wait between binary removals
DEFAULT_UNINSTALL_PAUSE = 1.0

# Window (in seconds) for the rest of an escape sequence to arrive
DEFAULT_ESCAPE_TIMEOUT = 0.1

# Max pending units discarded after an escape sequence
FLUSH_MAX_UNITS = 5


class Messages:
    """Farewell messages printed when the session ends."""

    GOODBYE = "Goodbye! o/"
    NO_RELEASE = "There is no release yet, please hold tight!"
    INSTALLED = "Done! Thanks a lot for trying out Bobbylisp!"
    UNINSTALLED = "Sad to see you go! Goodbye! o/"
    INSTALL_FAILED = "Installation failed: {reason}"
    UNINSTALL_FAILED = "Uninstall failed: {reason}"


class InstallMethod:
    """Install method names accepted by the CLI."""

    DOWNLOAD = "download"
    COMPILE = "compile"
    DEBUG = "debug"

    ALL = (DOWNLOAD, COMPILE, DEBUG)
