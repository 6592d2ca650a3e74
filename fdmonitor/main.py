from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .config import init_cfg
from .collectors import SnapshotError, list_descriptors
from .report import build_groups, collect_descriptors, render_report
from .resolver import resolve

class ArgParser(argparse.ArgumentParser):
    def format_usage(self) -> str:
        return f"usage:\n\t{self.prog} (name | pid)\n"

    def error(self, message: str):
        self.print_usage()
        self.exit(1)

def parse_args(argv: Optional[List[str]] = None):
    ap = ArgParser(description='List the open file descriptors of a process, grouped by target',
                   add_help=False)
    ap.add_argument('target', metavar='(name | pid)')
    if argv is None:
        argv = sys.argv[1:]
    # no options: anything, "-bash" included, is a process name or pid
    return ap.parse_args(['--', *argv])

def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")
    args = parse_args(argv)
    cfg = init_cfg()

    pid = resolve(args.target)
    if pid is None:
        print(f"process \"{args.target}\" not found")
        return 1

    try:
        entries = list_descriptors(pid, cfg.proc_root)
    except SnapshotError as e:
        print(f"[error] {e}")
        return 1

    descriptors = collect_descriptors(entries, cfg)
    for line in render_report(build_groups(descriptors, cfg), cfg):
        print(line)
    return 0

if __name__ == '__main__':
    sys.exit(main())
