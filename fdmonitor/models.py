from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

NUMBER_RE = re.compile(r"[0-9]+")

def parse_number(s: str) -> Optional[int]:
    """Non-negative decimal integer made of ASCII digits only, else None."""
    if not s or not NUMBER_RE.fullmatch(s):
        return None
    return int(s)

class FdKind(Enum):
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK = "block"
    CHARACTER = "character"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"
    NONE = "none"
    NOT_FOUND = "not_found"

KIND_NAMES = {
    FdKind.REGULAR: "regular",
    FdKind.DIRECTORY: "directory",
    FdKind.SYMLINK: "symlink",
    FdKind.BLOCK: "block",
    FdKind.CHARACTER: "character",
    FdKind.FIFO: "fifo",
    FdKind.SOCKET: "socket",
    FdKind.UNKNOWN: "unknown",
    FdKind.NONE: "none",
    FdKind.NOT_FOUND: "not_found",
}

def kind_to_str(kind) -> str:
    return KIND_NAMES.get(kind, "unrecognized")

@dataclass(frozen=True)
class Target:
    path: str
    kind: FdKind

    def __str__(self) -> str:
        return f"{self.path} ({kind_to_str(self.kind)})"

@dataclass(frozen=True)
class Descriptor:
    number: int
    target: Target

@dataclass
class Group:
    target: Target
    fds: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.fds)

    def add(self, fd: int) -> None:
        self.fds.append(fd)

    def shown(self, max_shown: int) -> Tuple[bool, List[int]]:
        """Return (truncated, fds) keeping only the last ``max_shown`` entries.

        A non-positive ``max_shown`` means no limit.
        """
        if 0 < max_shown < len(self.fds):
            return True, self.fds[-max_shown:]
        return False, list(self.fds)

@dataclass(frozen=True)
class RawEntry:
    name: str
    entry_path: str
    link_target: Optional[str]
    is_symlink: bool
    kind: FdKind  # type of whatever the entry points at
