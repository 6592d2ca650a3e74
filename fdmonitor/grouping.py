from __future__ import annotations
import logging
import os
from typing import Callable, Iterable, List

from .models import Descriptor, FdKind, Group, Target

log = logging.getLogger(__name__)

SameFile = Callable[[str, str], bool]

# kinds where two different path strings may still name the same inode
PROBED_KINDS = (FdKind.REGULAR, FdKind.DIRECTORY)

def same_file(a: str, b: str) -> bool:
    try:
        return os.path.samefile(a, b)
    except (OSError, ValueError) as e:
        log.debug("samefile(%r, %r) failed: %s", a, b, e)
        return False

def is_equivalent(t: Target, r: Target, same: SameFile = same_file) -> bool:
    """
    Whether candidate target ``t`` belongs to the group represented by ``r``.

    Kinds must match exactly. Identical paths always match. Differing paths
    only match for regular files and directories, and only when ``same``
    says both name the same underlying object; a failing probe is a miss.
    """
    if t.kind != r.kind:
        return False
    if t.path == r.path:
        return True
    if t.kind in PROBED_KINDS:
        try:
            return bool(same(r.path, t.path))
        except Exception as e:
            log.debug("equivalence probe failed for %r / %r: %s", r.path, t.path, e)
            return False
    return False

def group_descriptors(descriptors: Iterable[Descriptor], same: SameFile = same_file) -> List[Group]:
    groups: List[Group] = []
    for d in descriptors:
        for g in groups:
            if is_equivalent(d.target, g.target, same):
                g.add(d.number)
                break
        else:
            groups.append(Group(target=d.target, fds=[d.number]))
    return groups
