from __future__ import annotations
import sys
from dataclasses import dataclass
from pathlib import Path

PROC_ROOT = Path("/proc")

TARGET_WIDTH = 40
COUNT_WIDTH = 3
MAX_SHOWN_FDS = 7

ANOMALY_COLOR = "\033[91m"
DEFAULT_COLOR = "\033[39m"

@dataclass
class CFG:
    proc_root: Path = PROC_ROOT
    target_width: int = TARGET_WIDTH
    count_width: int = COUNT_WIDTH
    max_shown: int = MAX_SHOWN_FDS
    # the first collected descriptor never makes it into a group
    skip_first: bool = True
    color: bool = False

def init_cfg(stream=None) -> CFG:
    cfg = CFG()
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    cfg.color = bool(isatty and isatty())
    return cfg
