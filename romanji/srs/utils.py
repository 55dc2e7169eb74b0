import math
from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def resolve_now(now: Optional[datetime]) -> datetime:
    return now if now is not None else utcnow()


def add_days(moment: datetime, days: int) -> datetime:
    return moment + timedelta(days=days)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() sends halves to the even neighbour, which would make
    2.5-day intervals collapse to 2.
    """
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)
