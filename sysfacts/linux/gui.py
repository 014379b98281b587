from sysfacts.util import files
from sysfacts.util.errors import NotFoundError

UNKNOWN = "Unknown"


def _env_or_unknown(name: str) -> str:
    # An unset variable is normal (ssh sessions, servers), so it is not an error
    try:
        return files.read_env(name)
    except NotFoundError:
        return UNKNOWN


def desktop_environment() -> str:
    """
    Return the current desktop environment (XDG_CURRENT_DESKTOP) or "Unknown".
    """
    return _env_or_unknown("XDG_CURRENT_DESKTOP")


def session_type() -> str:
    """
    Return the current session type (e.g. wayland, x11) or "Unknown".
    """
    return _env_or_unknown("XDG_SESSION_TYPE")
