"""
Entry points for every fact sysfacts can read. Each call reads the current
state of the machine; nothing is cached between calls.
"""

import platform

import cpuinfo

from sysfacts.linux import cpu, gui, kernel, network
from sysfacts.linux.cpuinfo import parse_cpuinfo, parse_cpuinfo_text
from sysfacts.linux.meminfo import parse_meminfo, parse_meminfo_text
from sysfacts.linux.os_release import (
    parse_os_release,
    parse_os_release_file,
    parse_os_release_text,
)
from sysfacts.util.errors import UnsupportedError

X86_MACHINES = {"x86", "i386", "i486", "i586", "i686", "x86_64", "amd64"}

get_min_max_cpu_freq = cpu.get_min_max_cpu_freq
kernel_version = kernel.kernel_version
desktop_environment = gui.desktop_environment
session_type = gui.session_type

__all__ = [
    "arch",
    "desktop_environment",
    "get_cpu_vulnerabilities",
    "get_min_max_cpu_freq",
    "hostname",
    "kernel_version",
    "parse_cpuinfo",
    "parse_cpuinfo_text",
    "parse_meminfo",
    "parse_meminfo_text",
    "parse_os_release",
    "parse_os_release_file",
    "parse_os_release_text",
    "processor_name",
    "session_type",
]


def processor_name() -> str:
    """
    Return the CPU brand string from CPUID, or "Unknown" if the CPU reports none.
    Only x86 family processors carry one.
    """
    machine = platform.machine().lower()
    if machine not in X86_MACHINES:
        raise UnsupportedError(f"processor name lookup is not supported on {machine}")

    brand = cpuinfo.get_cpu_info().get("brand_raw")
    return brand if brand else "Unknown"


def get_cpu_vulnerabilities() -> dict[str, str]:
    """
    Return the vulnerabilities the CPU is affected by, keyed by name, with the
    kernel's mitigation as the value.
    """
    return cpu.get_cpu_vulnerabilities()


def arch() -> str:
    return kernel.arch()


def hostname() -> str:
    return network.hostname()
