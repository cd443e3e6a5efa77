from __future__ import annotations
import sys
import time
from contextlib import contextmanager
from typing import Iterator, TextIO


@contextmanager
def timed(label: str, stream: TextIO | None = None) -> Iterator[None]:
    """Print ``<label>: <elapsed>ms`` once the block finishes without error."""
    start = time.perf_counter()
    yield
    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"{label}: {elapsed_ms:.3f}ms", file=stream or sys.stdout)
