"""Debug output helpers shared by the condgate CLI runners."""

from __future__ import annotations

import argparse
from typing import Sequence


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def _dbg_lines(args: argparse.Namespace, header: str, lines: Sequence[str]) -> None:
    if not _debug_enabled(args):
        return
    _dbg(args, f"{header} lines={len(lines)}")
    for line in lines:
        _dbg(args, f"  {line}")
