"""Wall clock in UTC."""

from datetime import UTC, datetime


class SystemClock:
    """Clock returning timezone-aware UTC now."""

    def now(self) -> datetime:
        return datetime.now(UTC)
