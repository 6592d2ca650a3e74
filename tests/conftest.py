"""Shared fixtures: an in-memory process registry and a fake procfs tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterator, Optional

import pytest


class FakeRegistry:
    """Process registry over a plain dict of entry name -> command name."""

    def __init__(self, procs: Dict[str, Optional[str]]):
        self.procs = procs
        self.lookups: list[int] = []

    def entries(self) -> Iterator[str]:
        return iter(self.procs)

    def command_name(self, pid: int) -> Optional[str]:
        self.lookups.append(pid)
        return self.procs.get(str(pid))


class ExplodingRegistry:
    def entries(self):
        raise AssertionError("registry must not be consulted")

    def command_name(self, pid):
        raise AssertionError("registry must not be consulted")


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry({"11": "alpha", "12": "beta", "13": "alpha"})


@pytest.fixture
def fake_proc(tmp_path: Path) -> dict:
    """
    Build ``<tmp>/proc/4242/fd`` with a mix of entries:

      3, 4 -> data/app.log
      5    -> data/app.hardlink (hard link to app.log)
      6    -> data/pipe (fifo)
      7    -> data/ (directory)
      8    -> data/gone (missing)
      9       plain file, not a symlink
      notanfd -> data/app.log
    """
    data = tmp_path / "data"
    data.mkdir()
    log_file = data / "app.log"
    log_file.write_text("hello\n")
    hard = data / "app.hardlink"
    os.link(log_file, hard)
    fifo = data / "pipe"
    os.mkfifo(fifo)

    fd_dir = tmp_path / "proc" / "4242" / "fd"
    fd_dir.mkdir(parents=True)
    os.symlink(log_file, fd_dir / "3")
    os.symlink(log_file, fd_dir / "4")
    os.symlink(hard, fd_dir / "5")
    os.symlink(fifo, fd_dir / "6")
    os.symlink(data, fd_dir / "7")
    os.symlink(data / "gone", fd_dir / "8")
    (fd_dir / "9").write_text("")
    os.symlink(log_file, fd_dir / "notanfd")

    return {
        "proc_root": tmp_path / "proc",
        "pid": 4242,
        "fd_dir": fd_dir,
        "log": str(log_file),
        "hardlink": str(hard),
        "fifo": str(fifo),
        "dir": str(data),
        "gone": str(data / "gone"),
    }


class _CutShortScandir:
    """Yields only the entry named ``keep``, then fails like a vanished /proc/<pid>."""

    def __init__(self, entries, keep):
        self.entries = [e for e in entries if e.name == keep]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        yield from self.entries
        raise FileNotFoundError(2, "No such file or directory")


@pytest.fixture
def vanishing_fd_dir(monkeypatch):
    """Make ``os.scandir`` stop with ENOENT after returning fd 3."""
    real_scandir = os.scandir

    def scandir(path):
        with real_scandir(path) as it:
            entries = list(it)
        return _CutShortScandir(entries, "3")

    monkeypatch.setattr(os, "scandir", scandir)
