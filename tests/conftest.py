import platform
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def write(root: Path, path: str, contents: str) -> Path:
    target = root / path.lstrip("/")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents)
    return target


@pytest.fixture
def fixtures() -> Path:
    return FIXTURES


@pytest.fixture
def fake_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty machine root that every canonical path resolves under."""
    root = tmp_path / "root"
    root.mkdir()
    monkeypatch.setenv("SYSFACTS_ROOT", str(root))
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    return root


@pytest.fixture
def populated_root(fake_root: Path) -> Path:
    """A machine root with every file sysfacts reads."""
    write(fake_root, "/proc/cpuinfo", (FIXTURES / "cpuinfo_x86").read_text())
    write(fake_root, "/proc/meminfo", (FIXTURES / "meminfo").read_text())
    write(fake_root, "/etc/os-release", (FIXTURES / "os_release_ubuntu").read_text())
    write(fake_root, "/proc/sys/kernel/osrelease", "6.8.0-45-generic\n")
    write(fake_root, "/proc/sys/kernel/arch", "x86_64\n")
    write(fake_root, "/proc/sys/kernel/hostname", "workstation\n")
    write(
        fake_root,
        "/sys/devices/system/cpu/vulnerabilities/meltdown",
        "Mitigation: PTI\n",
    )
    write(
        fake_root,
        "/sys/devices/system/cpu/vulnerabilities/srbds",
        "Not affected\n",
    )
    write(
        fake_root,
        "/sys/devices/system/cpu/cpu0/cpufreq/cpuinfo_min_freq",
        "400000\n",
    )
    write(
        fake_root,
        "/sys/devices/system/cpu/cpu0/cpufreq/cpuinfo_max_freq",
        "4000000\n",
    )
    return fake_root
