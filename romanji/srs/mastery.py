"""Mastery tracker: ease-based scheduling from binary correct/incorrect answers.

Intervals are in days. The first two correct answers in a row schedule 1 and
3 days out; after that the previous interval is multiplied by the ease factor.
A wrong answer clears the streak and brings the item back the next day.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, MutableMapping, Optional, Tuple

from .stats import UserStats, record_daily_activity
from .utils import add_days, resolve_now, round_half_up

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
MAX_EASE_FACTOR = 3.0
EASE_BONUS = 0.1
EASE_PENALTY = 0.2

FAMILIAR_STREAK = 3
MASTERED_STREAK = 5


class MasteryLevel(str, Enum):
    UNSEEN = "Unseen"
    LEARNING = "Learning"
    FAMILIAR = "Familiar"
    MASTERED = "Mastered"


@dataclass
class MasteryRecord:
    item_id: str
    times_reviewed: int = 0
    times_correct: int = 0
    last_reviewed: Optional[datetime] = None
    next_review: Optional[datetime] = None
    ease_factor: float = DEFAULT_EASE_FACTOR
    interval: int = 0
    consecutive_correct: int = 0

    @property
    def accuracy(self) -> float:
        if self.times_reviewed == 0:
            return 0.0
        return self.times_correct / self.times_reviewed

    @property
    def mastery_level(self) -> MasteryLevel:
        if self.times_reviewed == 0:
            return MasteryLevel.UNSEEN
        if self.consecutive_correct >= MASTERED_STREAK:
            return MasteryLevel.MASTERED
        if self.consecutive_correct >= FAMILIAR_STREAK:
            return MasteryLevel.FAMILIAR
        return MasteryLevel.LEARNING


def record_review(
    record: Optional[MasteryRecord],
    correct: bool,
    now: Optional[datetime] = None,
    item_id: Optional[str] = None,
) -> Tuple[MasteryRecord, datetime]:
    """Apply one answer to *record* (created when None) and return it with its next review.

    The record is updated in place.

    Raises:
        ValueError: If there is no record and no *item_id* to create one for
    """
    if record is None:
        if item_id is None:
            raise ValueError("item_id is required to create a new mastery record")
        record = MasteryRecord(item_id=item_id)

    now = resolve_now(now)
    record.times_reviewed += 1
    record.last_reviewed = now

    if correct:
        record.times_correct += 1
        record.consecutive_correct += 1
        if record.consecutive_correct == 1:
            record.interval = 1
        elif record.consecutive_correct == 2:
            record.interval = 3
        else:
            record.interval = round_half_up(record.interval * record.ease_factor)
        record.ease_factor = min(MAX_EASE_FACTOR, record.ease_factor + EASE_BONUS)
    else:
        record.consecutive_correct = 0
        record.interval = 0
        record.ease_factor = max(MIN_EASE_FACTOR, record.ease_factor - EASE_PENALTY)

    record.next_review = add_days(now, max(1, record.interval))
    return record, record.next_review


def is_due(record: Optional[MasteryRecord], now: Optional[datetime] = None) -> bool:
    """An item is due if it was never scheduled or its review time has arrived."""
    if record is None or record.next_review is None:
        return True
    return resolve_now(now) >= record.next_review


def mastery_level(record: Optional[MasteryRecord]) -> MasteryLevel:
    return record.mastery_level if record is not None else MasteryLevel.UNSEEN


class MasteryTracker:
    """Mastery scheduling over a caller-owned ``item_id -> MasteryRecord`` store.

    The tracker never copies the store; persisting it and serialising
    concurrent reviews of the same item are up to the caller. When *stats*
    is given, every review is also counted towards the day of *now* there.
    """

    def __init__(
        self,
        store: Optional[MutableMapping[str, MasteryRecord]] = None,
        stats: Optional[UserStats] = None,
    ):
        self.store = store if store is not None else {}
        self.stats = stats

    def record_review(
        self, item_id: str, correct: bool, now: Optional[datetime] = None
    ) -> Tuple[MasteryRecord, datetime]:
        now = resolve_now(now)
        record, next_review = record_review(self.store.get(item_id), correct, now, item_id=item_id)
        self.store[item_id] = record
        if self.stats is not None:
            record_daily_activity(self.stats, correct, now.date())
        return record, next_review

    def progress_for(self, item_id: str) -> Optional[MasteryRecord]:
        return self.store.get(item_id)

    def mastery_level(self, item_id: str) -> MasteryLevel:
        return mastery_level(self.store.get(item_id))

    def is_due(self, item_id: str, now: Optional[datetime] = None) -> bool:
        return is_due(self.store.get(item_id), now)

    def items_for_review(self, item_ids: Iterable[str], now: Optional[datetime] = None) -> List[str]:
        now = resolve_now(now)
        return [item_id for item_id in item_ids if is_due(self.store.get(item_id), now)]

    def _count_level(self, level: MasteryLevel) -> int:
        return sum(1 for record in self.store.values() if record.mastery_level == level)

    @property
    def total_reviewed(self) -> int:
        return sum(1 for record in self.store.values() if record.times_reviewed > 0)

    @property
    def total_mastered(self) -> int:
        return self._count_level(MasteryLevel.MASTERED)

    @property
    def total_familiar(self) -> int:
        return self._count_level(MasteryLevel.FAMILIAR)

    @property
    def total_learning(self) -> int:
        return self._count_level(MasteryLevel.LEARNING)

    @property
    def overall_accuracy(self) -> float:
        attempts = sum(record.times_reviewed for record in self.store.values())
        if attempts == 0:
            return 0.0
        return sum(record.times_correct for record in self.store.values()) / attempts
