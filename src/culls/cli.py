from __future__ import annotations
import logging, sys
from typing import Sequence

from .culler import cull_manifest, find_manifest
from .report import print_report
from .utils.args import parse_preserve
from .utils.timing import timed

TIMER_LABEL = "\U0001F33F culls"


def main(argv: Sequence[str] | None = None, cwd: str | None = None) -> None:
    """Cull ``<cwd>/package.json`` in place.

    Only ``--preserve=<a,b,...>`` is read from ``argv``; every other argument
    is ignored. Read, parse and write errors propagate to the caller.

    :param argv: Arguments without the program name (default: ``sys.argv[1:]``).
    :param cwd: Directory holding ``package.json`` (default: process cwd).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with timed(TIMER_LABEL):
        preserve = parse_preserve(args)
        result = cull_manifest(find_manifest(cwd), preserve)
        print_report(result)
