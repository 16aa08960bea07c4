"""Progress reporting with time estimates."""

from __future__ import annotations

import math
import time
from collections import deque
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Awaitable, Callable

_U32_MAX = 0xFFFFFFFF


def format_percentage(p: float) -> str:
    """Format a fraction as a percentage with up to two decimals.

    0.42 gives "42%", 0.425 gives "42.5%", 0.4257 gives "42.57%".
    """
    significand = min(max(math.floor(p * 10_000.0 + 0.5), 0), _U32_MAX)
    if significand % 100 == 0:
        precision = 0
    elif significand % 10 == 0:
        precision = 1
    else:
        precision = 2
    return f"{significand / 100.0:.{precision}f}%"


def format_duration(d: timedelta) -> str:
    """Format a duration as hours, minutes and seconds, omitting zero parts."""
    total_seconds = d.total_seconds()
    whole_seconds = int(total_seconds)
    parts = []
    hours = whole_seconds // 3600
    if hours > 0:
        parts.append(f"{hours}h")
    minutes = (whole_seconds % 3600) // 60
    if minutes > 0:
        parts.append(f"{minutes}m")
    seconds = math.fmod(total_seconds, 60.0)
    if seconds > 0.0:
        parts.append(f"{seconds:.1f}s")
    return "".join(parts)


@dataclass(frozen=True)
class ProgressInfo:
    """A snapshot of progress and timing estimates."""

    progress: float
    elapsed: timedelta
    estimated_remaining: timedelta
    estimated_total: timedelta

    @classmethod
    def empty(cls) -> ProgressInfo:
        zero = timedelta(0)
        return cls(0.0, zero, zero, zero)

    def __str__(self) -> str:
        return (
            f"{self.progress * 100.0:>5.1f}% done... "
            f"[{format_duration(self.elapsed)} elapsed, "
            f"est. {format_duration(self.estimated_remaining)}"
            f"/{format_duration(self.estimated_total)} remaining]"
        )


@dataclass(frozen=True)
class FormattedProgressInfo:
    """Human-readable rendering of a :class:`ProgressInfo`."""

    progress: str
    elapsed: str
    estimated_remaining: str
    estimated_total: str

    @classmethod
    def from_info(cls, info: ProgressInfo) -> FormattedProgressInfo:
        return cls(
            progress=format_percentage(info.progress),
            elapsed=format_duration(info.elapsed),
            estimated_remaining=format_duration(info.estimated_remaining),
            estimated_total=format_duration(info.estimated_total),
        )


class ProgressTracker:
    """Counts completed steps and reports progress every ``update_interval`` steps.

    ``update_fn`` receives a :class:`ProgressInfo` and returns an awaitable.
    The remaining-time estimate averages over the last ``memory`` reports.
    """

    def __init__(
        self,
        total: int,
        memory: int,
        update_interval: int,
        update_fn: Callable[[ProgressInfo], Awaitable[Any]],
    ) -> None:
        self._instants: deque[float] = deque()
        self._current = 0
        self._total = total
        self._start = time.monotonic()
        self._memory = memory
        self._update_interval = update_interval
        self._update_fn = update_fn

    @property
    def current(self) -> int:
        return self._current

    @property
    def total(self) -> int:
        return self._total

    async def mark(self) -> None:
        """Record one completed step, reporting progress when due."""
        self._current += 1
        if self._current % self._update_interval == 0 or self._current == self._total:
            self._push_instant()
            await self._update_fn(self._progress_info())

    def _push_instant(self) -> None:
        self._instants.appendleft(time.monotonic())
        if len(self._instants) > self._memory:
            self._instants.pop()

    def _progress_info(self) -> ProgressInfo:
        progress = self._current / self._total
        elapsed = timedelta(seconds=time.monotonic() - self._start)

        gaps = [newer - older for newer, older in zip(self._instants, list(self._instants)[1:])]
        average = sum(gaps) / len(gaps) if gaps else 0.0

        remaining_steps = (self._total - self._current) / self._update_interval
        estimated_remaining = timedelta(seconds=average * remaining_steps)
        return ProgressInfo(
            progress=progress,
            elapsed=elapsed,
            estimated_remaining=estimated_remaining,
            estimated_total=elapsed + estimated_remaining,
        )