"""
Logical Clock for Deterministic Rendering
=========================================

Injectable "now" provider. The layout engine never reads system time;
the service asks this clock once per request and passes the instant in.

GUARANTEES:
- Same records + same clock instant = byte-identical output
- A fixed clock never reads system time
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .dates import as_utc


@dataclass
class LogicalClock:
    """
    Injectable clock.

    MODES:
    ======
    1. LIVE mode: reads real system time (UTC), counts every tick
    2. FIXED mode: always returns the pinned instant
    """
    _ticks: int = 0
    _fixed: Optional[datetime] = None

    def now(self) -> datetime:
        """Get current logical time (UTC, timezone-aware)."""
        if self._fixed is not None:
            current = self._fixed
        else:
            current = datetime.now(timezone.utc)
        self._ticks += 1
        return current

    def tick_count(self) -> int:
        """Number of instants handed out so far."""
        return self._ticks

    def is_live(self) -> bool:
        return self._fixed is None

    @classmethod
    def live(cls) -> LogicalClock:
        """Create clock in LIVE mode (uses system time)."""
        return cls()

    @classmethod
    def fixed(cls, instant: datetime) -> LogicalClock:
        """Create clock pinned to `instant`. Naive values are taken as UTC."""
        return cls(_fixed=as_utc(instant))

    def __repr__(self) -> str:
        mode = "LIVE" if self.is_live() else f"FIXED {self._fixed.isoformat()}"
        return f"LogicalClock({mode}, ticks={self._ticks})"
