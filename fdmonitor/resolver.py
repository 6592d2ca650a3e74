from __future__ import annotations
import logging
from typing import Iterable, Optional, Protocol

from .models import parse_number

log = logging.getLogger(__name__)

class ProcessRegistry(Protocol):
    def entries(self) -> Iterable[str]: ...
    def command_name(self, pid: int) -> Optional[str]: ...

def parse_pid(s: str) -> Optional[int]:
    return parse_number(s)

def find_by_name(name: str, registry: ProcessRegistry) -> Optional[int]:
    """
    First registry entry whose command name equals ``name`` exactly.
    Iteration order is whatever the registry yields, so two processes
    sharing a name resolve to the one seen first.
    """
    for entry in registry.entries():
        pid = parse_pid(entry)
        if pid is None:
            continue
        cmd = registry.command_name(pid)
        if cmd is None:
            log.debug("no command name for PID %d", pid)
            continue
        if cmd == name:
            return pid
    return None

def resolve(identifier: str, registry: Optional[ProcessRegistry] = None) -> Optional[int]:
    pid = parse_pid(identifier)
    if pid is not None:
        return pid

    if registry is None:
        from .collectors.generic import PsutilRegistry
        registry = PsutilRegistry()

    pid = find_by_name(identifier, registry)
    if pid is not None:
        print(f"[*] found process \"{identifier}\" with PID {pid}")
    return pid
