from __future__ import annotations
from typing import List, Sequence

PRESERVE_FLAG = "--preserve="


def parse_preserve(argv: Sequence[str]) -> List[str]:
    """
    Extract custom preserved field names from command-line arguments.

    Only the ``--preserve=<csv>`` form is recognized and the first match wins.
    Every other argument is ignored.

    Example:
        Input:  ["--verbose", "--preserve=customField, other", "--preserve=x"]
        Output: ["customField", "other"]

    :param argv: Arguments without the program name.
    :returns: Trimmed field names, or an empty list if the flag is absent.
    """
    for arg in argv:
        if arg.startswith(PRESERVE_FLAG):
            return [token.strip() for token in arg[len(PRESERVE_FLAG):].split(",")]
    return []
