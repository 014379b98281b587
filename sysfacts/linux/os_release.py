import logging
from dataclasses import fields
from pathlib import Path

from dacite import from_dict

from sysfacts.data.os_release import OsRelease
from sysfacts.util import files, paths
from sysfacts.util.errors import NotFoundError

logger = logging.getLogger(__name__)

# Keys the os-release documentation shows with quoted values
QUOTED_KEYS = {
    "NAME",
    "PRETTY_NAME",
    "CPE_NAME",
    "VARIANT",
    "VERSION",
    "BUILD_ID",
    "HOME_URL",
    "DOCUMENTATION_URL",
    "SUPPORT_URL",
    "BUG_REPORT_URL",
    "PRIVACY_POLICY_URL",
    "ANSI_COLOR",
    "VENDOR_NAME",
    "VENDOR_URL",
}

# Space separated lists
LIST_KEYS = {"ID_LIKE", "PORTABLE_PREFIXES"}


def _unquote(value: str) -> str:
    """
    Remove one pair of surrounding double quotes.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_os_release_text(text: str) -> OsRelease:
    known = {f.name.upper(): f.name for f in fields(OsRelease)}
    data: dict[str, str | list[str]] = {}

    for line in text.splitlines():
        if "=" not in line:
            continue

        # Values such as URLs may contain "=" themselves
        key, value = line.split("=", 1)
        if key not in known:
            continue

        if key in LIST_KEYS:
            data[known[key]] = _unquote(value).split()
        elif key in QUOTED_KEYS:
            data[known[key]] = _unquote(value)
        else:
            data[known[key]] = value

    logger.debug(f"parsed {len(data)} os-release fields")
    return from_dict(data_class=OsRelease, data=data)


def parse_os_release_file(path: str | Path) -> OsRelease:
    """
    Parse the given os-release style file, raising NotFoundError if it does not exist.
    """
    return parse_os_release_text(files.read_file(path))


def parse_os_release() -> OsRelease:
    """
    Parse /etc/os-release, or /usr/lib/os-release when the former does not exist.
    """
    paths.require_linux()
    candidates = [
        paths.resolve(paths.OS_RELEASE),
        paths.resolve(paths.OS_RELEASE_FALLBACK),
    ]
    for candidate in candidates:
        if candidate.exists():
            logger.debug(f"using {candidate}")
            return parse_os_release_file(candidate)

    raise NotFoundError(
        candidates[0], f"neither {candidates[0]} nor {candidates[1]} exists"
    )
