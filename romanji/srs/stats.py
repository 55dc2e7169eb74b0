"""Daily review activity and study streaks."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class DailyStats:
    day: date
    review_count: int = 0
    correct_count: int = 0


@dataclass
class UserStats:
    current_streak: int = 0
    longest_streak: int = 0
    last_active_date: Optional[date] = None
    daily_history: List[DailyStats] = field(default_factory=list)
    total_lifetime_reviews: int = 0

    def for_day(self, day: date) -> Optional[DailyStats]:
        return next((entry for entry in self.daily_history if entry.day == day), None)


def record_daily_activity(stats: UserStats, correct: bool, today: Optional[date] = None) -> UserStats:
    """Count one review for *today* and advance the streak on the first review of a day.

    A first review the day after the last active day extends the streak; after
    a longer gap the streak starts over at 1.
    """
    today = today or date.today()
    entry = stats.for_day(today)

    if entry is None:
        if stats.last_active_date is None:
            stats.current_streak = 1
        else:
            gap = (today - stats.last_active_date).days
            if gap == 1:
                stats.current_streak += 1
            elif gap > 1:
                stats.current_streak = 1
        entry = DailyStats(day=today)
        stats.daily_history.append(entry)

    entry.review_count += 1
    if correct:
        entry.correct_count += 1

    stats.last_active_date = today
    stats.longest_streak = max(stats.longest_streak, stats.current_streak)
    stats.total_lifetime_reviews += 1
    return stats


def refresh_streak(stats: UserStats, today: Optional[date] = None) -> UserStats:
    """Drop the current streak to 0 if more than a day has passed without reviews."""
    today = today or date.today()
    if stats.last_active_date is not None and (today - stats.last_active_date).days > 1:
        stats.current_streak = 0
    return stats


def today_review_count(stats: UserStats, today: Optional[date] = None) -> int:
    entry = stats.for_day(today or date.today())
    return entry.review_count if entry else 0
