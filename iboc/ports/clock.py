from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    def now(self) -> datetime:
        """Local wall-clock time (naive), the time zone events are entered in."""
        ...

    def now_utc(self) -> datetime: ...
