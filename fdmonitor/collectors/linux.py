from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from ..config import PROC_ROOT
from ..models import FdKind, RawEntry

log = logging.getLogger(__name__)

MODE_KINDS = {
    stat.S_IFREG: FdKind.REGULAR,
    stat.S_IFDIR: FdKind.DIRECTORY,
    stat.S_IFLNK: FdKind.SYMLINK,
    stat.S_IFBLK: FdKind.BLOCK,
    stat.S_IFCHR: FdKind.CHARACTER,
    stat.S_IFIFO: FdKind.FIFO,
    stat.S_IFSOCK: FdKind.SOCKET,
}

class SnapshotError(Exception):
    def __init__(self, pid: int, cause: OSError):
        super().__init__(f"cannot read descriptors of PID {pid}: {cause.strerror or cause}")
        self.pid = pid
        self.cause = cause

def kind_from_mode(mode: int) -> FdKind:
    return MODE_KINDS.get(stat.S_IFMT(mode), FdKind.UNKNOWN)

def _followed_kind(path: str) -> FdKind:
    try:
        return kind_from_mode(os.stat(path).st_mode)
    except FileNotFoundError:
        return FdKind.NOT_FOUND
    except OSError as e:
        log.debug("stat %s failed: %s", path, e)
        return FdKind.NONE

def _read_link(path: str) -> Optional[str]:
    try:
        return os.readlink(path)
    except OSError as e:
        # fd closed between listing and reading
        log.debug("readlink %s failed: %s", path, e)
        return None

def list_descriptors(pid: int, proc_root: Path = PROC_ROOT) -> List[RawEntry]:
    fd_dir = Path(proc_root) / str(pid) / "fd"
    try:
        it = os.scandir(fd_dir)
    except OSError as e:
        raise SnapshotError(pid, e) from e

    entries: List[RawEntry] = []
    with it:
        try:
            for de in it:
                try:
                    is_link = de.is_symlink()
                except OSError:
                    is_link = False
                entries.append(RawEntry(
                    name=de.name,
                    entry_path=de.path,
                    link_target=_read_link(de.path) if is_link else None,
                    is_symlink=is_link,
                    kind=_followed_kind(de.path),
                ))
        except OSError as e:
            # process exited while its fd directory was being read
            log.warning("PID %d: fd listing cut short after %d entries: %s", pid, len(entries), e)
    log.debug("PID %d: %d fd entries", pid, len(entries))
    return entries
