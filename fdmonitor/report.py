from __future__ import annotations
import logging
from typing import Callable, Iterable, List, Optional

from .config import ANOMALY_COLOR, CFG, DEFAULT_COLOR
from .grouping import SameFile, group_descriptors, same_file
from .models import Descriptor, Group, RawEntry, Target, kind_to_str, parse_number

log = logging.getLogger(__name__)

def anomaly(msg: str, cfg: CFG, out: Callable[[str], None] = print) -> None:
    if cfg.color:
        msg = f"{ANOMALY_COLOR}{msg}{DEFAULT_COLOR}"
    out(msg)

def collect_descriptors(entries: Iterable[RawEntry], cfg: Optional[CFG] = None,
                        out: Callable[[str], None] = print) -> List[Descriptor]:
    """Turn raw fd-directory entries into descriptors, reporting the ones that are not."""
    cfg = cfg or CFG()
    descriptors: List[Descriptor] = []
    for e in entries:
        fd = parse_number(e.name)
        if fd is None:
            anomaly(f"entry \"{e.entry_path}\" is not a file descriptor", cfg, out)
            continue
        if not e.is_symlink:
            anomaly(f"entry \"{e.entry_path}\" ({kind_to_str(e.kind)}) is not a symlink", cfg, out)
            continue
        if e.link_target is None:
            anomaly(f"entry \"{e.entry_path}\" has no readable link target", cfg, out)
            continue
        descriptors.append(Descriptor(number=fd, target=Target(path=e.link_target, kind=e.kind)))
    return descriptors

def build_groups(descriptors: List[Descriptor], cfg: Optional[CFG] = None,
                 same: SameFile = same_file) -> List[Group]:
    cfg = cfg or CFG()
    if cfg.skip_first and descriptors:
        log.debug("skipping first descriptor %d", descriptors[0].number)
        descriptors = descriptors[1:]
    return group_descriptors(descriptors, same)

def format_group(g: Group, cfg: Optional[CFG] = None) -> str:
    cfg = cfg or CFG()
    truncated, fds = g.shown(cfg.max_shown)
    head = f"{str(g.target):<{cfg.target_width}} [{g.count:>{cfg.count_width}}] "
    return head + ("..." if truncated else "") + ", ".join(str(fd) for fd in fds)

def render_report(groups: Iterable[Group], cfg: Optional[CFG] = None) -> List[str]:
    return [format_group(g, cfg) for g in groups]
