from datetime import UTC, datetime


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def epoch_ms(self) -> int:
        return int(self.now_utc().timestamp() * 1000)
