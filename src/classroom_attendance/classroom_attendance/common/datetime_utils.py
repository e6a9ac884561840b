from __future__ import annotations

from datetime import datetime
from typing import Protocol


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Clock backed by the local wall time."""

    def now(self) -> datetime:
        return now_local()
