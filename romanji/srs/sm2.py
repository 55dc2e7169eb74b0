"""SM-2 variant with four answer buttons.

Ratings map to quality 0..3 (rather than SM-2's 0..5), so every answer,
including "easy", lowers the ease factor a little; the interval adjustment
per rating is what separates the buttons.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Iterable, List, MutableMapping, Optional, Tuple

from .utils import add_days, resolve_now, round_half_up

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
LEARNED_INTERVAL_DAYS = 21

HARD_MULTIPLIER = 0.8
EASY_MULTIPLIER = 1.3


class Rating(IntEnum):
    AGAIN = 0
    HARD = 1
    GOOD = 2
    EASY = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class SM2Record:
    item_id: str
    next_review: datetime
    last_reviewed: Optional[datetime] = None
    ease_factor: float = DEFAULT_EASE_FACTOR
    interval: int = 1
    repetitions: int = 0

    @property
    def is_learned(self) -> bool:
        return self.interval > LEARNED_INTERVAL_DAYS


def next_ease_factor(ease_factor: float, rating: Rating) -> float:
    q = float(rating)
    return max(MIN_EASE_FACTOR, ease_factor + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)))


def record_review(
    record: Optional[SM2Record],
    rating: Rating,
    now: Optional[datetime] = None,
    item_id: Optional[str] = None,
) -> Tuple[SM2Record, datetime]:
    """Apply one rating to *record* (created when None) and return it with its next review.

    The record is updated in place.

    Raises:
        ValueError: If *rating* is not a valid :class:`Rating`, or there is no
            record and no *item_id* to create one for
    """
    rating = Rating(rating)
    now = resolve_now(now)
    if record is None:
        if item_id is None:
            raise ValueError("item_id is required to create a new SM-2 record")
        record = SM2Record(item_id=item_id, next_review=now)

    record.last_reviewed = now

    if rating == Rating.AGAIN:
        record.repetitions = 0
        record.interval = 1
    else:
        if record.repetitions == 0:
            record.interval = 1
        elif record.repetitions == 1:
            record.interval = 6
        else:
            record.interval = round_half_up(record.interval * record.ease_factor)
        record.repetitions += 1

    record.ease_factor = next_ease_factor(record.ease_factor, rating)

    if rating == Rating.AGAIN:
        record.interval = 1
    elif rating == Rating.HARD:
        record.interval = max(1, round_half_up(record.interval * HARD_MULTIPLIER))
    elif rating == Rating.EASY:
        record.interval = round_half_up(record.interval * EASY_MULTIPLIER)

    record.next_review = add_days(now, max(1, record.interval))
    return record, record.next_review


def is_due(record: Optional[SM2Record], now: Optional[datetime] = None) -> bool:
    if record is None:
        return True
    return record.next_review <= resolve_now(now)


class SM2Scheduler:
    """SM-2 scheduling over a caller-owned ``item_id -> SM2Record`` store."""

    def __init__(self, store: Optional[MutableMapping[str, SM2Record]] = None):
        self.store = store if store is not None else {}

    def record_review(
        self, item_id: str, rating: Rating, now: Optional[datetime] = None
    ) -> Tuple[SM2Record, datetime]:
        record, next_review = record_review(self.store.get(item_id), rating, now, item_id=item_id)
        self.store[item_id] = record
        return record, next_review

    def is_due(self, item_id: str, now: Optional[datetime] = None) -> bool:
        return is_due(self.store.get(item_id), now)

    def due_items(self, item_ids: Iterable[str], now: Optional[datetime] = None) -> List[str]:
        """Items among *item_ids* that are due; items never reviewed count as due."""
        now = resolve_now(now)
        return [item_id for item_id in item_ids if is_due(self.store.get(item_id), now)]

    def due_count(self, now: Optional[datetime] = None) -> int:
        """Number of stored records that are due."""
        now = resolve_now(now)
        return sum(1 for record in self.store.values() if is_due(record, now))

    def learned_count(self) -> int:
        return sum(1 for record in self.store.values() if record.is_learned)

    def total_reviews(self) -> int:
        return sum(record.repetitions for record in self.store.values())
