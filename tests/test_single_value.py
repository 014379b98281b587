"""Tests for meminfo, the kernel and hostname readers, and the session queries."""

from pathlib import Path

import pytest

from sysfacts.data.meminfo import Meminfo
from sysfacts.linux import gui, kernel, network
from sysfacts.linux.meminfo import parse_meminfo, parse_meminfo_text
from sysfacts.util.errors import NotFoundError, UnsupportedError


def test_meminfo_keeps_units(fixtures: Path) -> None:
    assert parse_meminfo(fixtures / "meminfo") == Meminfo(
        mem_total="16318412 kB", swap_total="2097148 kB"
    )


def test_meminfo_absent_keys_are_empty() -> None:
    assert parse_meminfo_text("MemFree: 10 kB\n") == Meminfo()


def test_meminfo_keys_match_exactly() -> None:
    assert parse_meminfo_text("memtotal: 10 kB\nSwapTotal:0 kB\n") == Meminfo(
        swap_total="0 kB"
    )


def test_meminfo_missing_is_not_found(fake_root: Path) -> None:
    with pytest.raises(NotFoundError):
        parse_meminfo()


def test_kernel_readers(populated_root: Path) -> None:
    assert kernel.kernel_version() == "6.8.0-45-generic"
    assert kernel.arch() == "x86_64"
    assert network.hostname() == "workstation"


def test_hostname_strips_only_one_newline(fake_root: Path) -> None:
    (fake_root / "proc/sys/kernel").mkdir(parents=True)
    (fake_root / "proc/sys/kernel/hostname").write_text("box\n\n")

    assert network.hostname() == "box\n"


def test_kernel_readers_missing(fake_root: Path) -> None:
    with pytest.raises(NotFoundError):
        kernel.kernel_version()
    with pytest.raises(NotFoundError):
        network.hostname()


def test_linux_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("platform.system", lambda: "Darwin")

    with pytest.raises(UnsupportedError):
        kernel.arch()
    with pytest.raises(UnsupportedError):
        parse_meminfo()


def test_session_queries(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    monkeypatch.setenv("XDG_SESSION_TYPE", "wayland")

    assert gui.desktop_environment() == "GNOME"
    assert gui.session_type() == "wayland"


def test_session_queries_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)
    monkeypatch.delenv("XDG_SESSION_TYPE", raising=False)

    assert gui.desktop_environment() == "Unknown"
    assert gui.session_type() == "Unknown"
