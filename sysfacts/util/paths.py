import os
import platform
from pathlib import Path

from sysfacts.util.errors import UnsupportedError

CPUINFO = "/proc/cpuinfo"
MEMINFO = "/proc/meminfo"
OS_RELEASE = "/etc/os-release"
OS_RELEASE_FALLBACK = "/usr/lib/os-release"
VULNERABILITIES = "/sys/devices/system/cpu/vulnerabilities"
CPUFREQ = "/sys/devices/system/cpu/cpu{n}/cpufreq"
KERNEL_OSRELEASE = "/proc/sys/kernel/osrelease"
KERNEL_ARCH = "/proc/sys/kernel/arch"
KERNEL_HOSTNAME = "/proc/sys/kernel/hostname"
PIXMAPS = "/usr/share/pixmaps"


def get_root() -> Path:
    """
    Return the directory every canonical path is resolved under.
    SYSFACTS_ROOT points this at a copy of a machine's /proc, /sys and /etc.
    """
    root = os.environ.get("SYSFACTS_ROOT")
    return Path(root) if root else Path("/")


def resolve(path: str) -> Path:
    """
    Resolve a canonical absolute path against the configured root.
    """
    return get_root() / path.lstrip("/")


def require_linux():
    if platform.system() != "Linux":
        raise UnsupportedError(f"{platform.system()} is not supported, Linux only")


def get_cache_directory() -> Path:
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        cache_dir = Path(xdg_cache) / "sysfacts"
    else:
        cache_dir = Path.home() / ".cache/sysfacts"

    cache_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

    return cache_dir
