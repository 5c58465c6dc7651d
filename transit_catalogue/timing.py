"""Measuring and reporting how long a block of code takes."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class LogDuration:
    """Context manager that reports elapsed time in whole milliseconds."""

    def __init__(self, text: str, stream: TextIO | None = None) -> None:
        self.text = text
        self._stream = stream
        self._start = 0

    def __enter__(self) -> "LogDuration":
        self._start = time.monotonic_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed_ms = (time.monotonic_ns() - self._start) // 1_000_000
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"{self.text}: {elapsed_ms} ms", file=stream, flush=True)
        return False