from __future__ import annotations
import sys
from typing import Iterable, List, TextIO

from .types import CullResult

HEADER = "Removed package.json fields:"


def format_report(removed: Iterable[str]) -> List[str]:
    """Build the removal report lines; empty when nothing was removed."""
    names = sorted(removed)
    if not names:
        return []
    return [HEADER, *(f"- {name}" for name in names), ""]


def print_report(result: CullResult, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for line in format_report(result.removed_sorted()):
        print(line, file=out)
