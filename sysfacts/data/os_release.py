import logging
from dataclasses import dataclass
from pathlib import Path

from sysfacts.util import files, paths
from sysfacts.util.errors import SysFactsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OsRelease:
    """
    Every field of the os-release manifest. A field is None unless its key
    appears in the file.
    See https://www.freedesktop.org/software/systemd/man/latest/os-release.html
    """

    # General information about the OS
    name: str | None = None
    id: str | None = None
    id_like: list[str] | None = None
    pretty_name: str | None = None
    cpe_name: str | None = None
    variant: str | None = None
    variant_id: str | None = None
    # Version information
    version: str | None = None
    version_id: str | None = None
    version_codename: str | None = None
    build_id: str | None = None
    image_id: str | None = None
    image_version: str | None = None
    # Links and presentation
    home_url: str | None = None
    documentation_url: str | None = None
    support_url: str | None = None
    bug_report_url: str | None = None
    privacy_policy_url: str | None = None
    support_end: str | None = None
    logo: str | None = None
    ansi_color: str | None = None
    vendor_name: str | None = None
    vendor_url: str | None = None
    # Metadata and distro defaults
    default_hostname: str | None = None
    architecture: str | None = None
    sysext_level: str | None = None
    confext_level: str | None = None
    sysext_scope: str | None = None
    confext_scope: str | None = None
    portable_prefixes: list[str] | None = None

    def get_name(self) -> str | None:
        """
        Return PRETTY_NAME if it was set, otherwise NAME (or None).
        """
        if self.pretty_name is not None:
            return self.pretty_name
        return self.name

    def get_logo_svg(self, pixmaps_dir: str | Path | None = None) -> str | None:
        """
        Return the contents of /usr/share/pixmaps/<LOGO>.svg.

        Returns None when LOGO is unset or the icon does not exist. A read
        failure returns an empty string instead of raising: the logo is
        decoration and callers should not have to handle its errors.
        """
        if self.logo is None:
            return None

        directory = Path(pixmaps_dir) if pixmaps_dir else paths.resolve(paths.PIXMAPS)
        svg = directory / f"{self.logo}.svg"
        if not svg.exists():
            return None

        try:
            return files.read_file(svg)
        except SysFactsError as e:
            logger.warning(f"failed to read {svg}: {e}")
            return ""
