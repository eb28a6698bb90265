# lib/randgraph/progress.py
"""
Single-line tick meter for headless runs.

    [Watts Strogatz] tick 120/300  40.0%  812.4 ticks/s

The label follows model switches; a disabled meter counts but writes nothing.
"""
from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import Iterator, TextIO


class TickMeter:
    def __init__(self, total: int | None, label: str = "", stream: TextIO | None = None,
                 enabled: bool = True, interval: float = 0.1):
        self.total = total
        self.label = label
        self.stream = stream if stream is not None else sys.stderr
        self.enabled = enabled
        self.interval = interval
        self.ticks = 0
        self._start = time.perf_counter()
        self._last_draw = 0.0

    def relabel(self, label: str) -> None:
        self.label = label
        self._draw(force=True)

    @property
    def rate(self) -> float:
        elapsed = time.perf_counter() - self._start
        return self.ticks / elapsed if elapsed > 0 else 0.0

    def update(self, n: int = 1) -> None:
        self.ticks += n
        self._draw(force=self.total is not None and self.ticks >= self.total)

    def line(self) -> str:
        if self.total:
            pct = 100.0 * self.ticks / self.total
            count = f"tick {self.ticks}/{self.total} {pct:5.1f}%"
        else:
            count = f"tick {self.ticks}"
        return f"[{self.label}] {count} {self.rate:7.1f} ticks/s"

    def _draw(self, force: bool = False) -> None:
        if not self.enabled:
            return
        now = time.perf_counter()
        if not force and now - self._last_draw < self.interval:
            return
        self._last_draw = now
        self.stream.write("\r" + self.line())
        self.stream.flush()

    def close(self) -> None:
        if self.enabled:
            self._draw(force=True)
            self.stream.write("\n")
            self.stream.flush()


@contextmanager
def tick_meter(total: int | None, label: str = "", stream: TextIO | None = None,
               enabled: bool = True) -> Iterator[TickMeter]:
    meter = TickMeter(total, label, stream=stream, enabled=enabled)
    try:
        yield meter
    finally:
        meter.close()
