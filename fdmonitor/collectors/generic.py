from __future__ import annotations
from typing import Iterator, Optional

import psutil

class PsutilRegistry:
    """Process registry backed by psutil."""

    def entries(self) -> Iterator[str]:
        for pid in psutil.pids():
            yield str(pid)

    def command_name(self, pid: int) -> Optional[str]:
        try:
            cmdline = psutil.Process(pid).cmdline()
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
            return None
        if not cmdline:
            # kernel threads have no argv
            return None
        return cmdline[0]
