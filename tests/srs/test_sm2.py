"""Tests for the SM-2 scheduling policy."""
import copy
import pytest
from datetime import timedelta

from romanji.srs.sm2 import (
    Rating,
    SM2Record,
    SM2Scheduler,
    is_due,
    next_ease_factor,
    record_review,
)


def review_sequence(ratings, now, item_id="x"):
    record = None
    intervals = []
    for rating in ratings:
        record, _ = record_review(record, rating, now, item_id=item_id)
        intervals.append(record.interval)
    return record, intervals


class TestRating:

    def test_quality_values(self):
        assert [int(r) for r in Rating] == [0, 1, 2, 3]

    def test_labels(self):
        assert [r.label for r in Rating] == ["Again", "Hard", "Good", "Easy"]

    def test_rejects_out_of_range(self, now):
        with pytest.raises(ValueError):
            record_review(None, 4, now, item_id="x")
        with pytest.raises(ValueError):
            record_review(None, "good", now, item_id="x")


class TestEaseFactor:

    @pytest.mark.parametrize("rating, delta", [
        (Rating.AGAIN, -0.8),
        (Rating.HARD, -0.54),
        (Rating.GOOD, -0.32),
        (Rating.EASY, -0.14),
    ])
    def test_delta_per_rating(self, rating, delta):
        assert next_ease_factor(2.5, rating) == pytest.approx(2.5 + delta)

    def test_floor(self):
        assert next_ease_factor(1.3, Rating.EASY) == 1.3


class TestRecordReview:

    def test_first_good(self, now):
        record, next_review = record_review(None, Rating.GOOD, now, item_id="phrase-1")

        assert record.item_id == "phrase-1"
        assert record.repetitions == 1
        assert record.interval == 1
        assert record.ease_factor == pytest.approx(2.18)
        assert record.last_reviewed == now
        assert next_review == now + timedelta(days=1)

    def test_three_goods(self, now):
        record, intervals = review_sequence([Rating.GOOD] * 3, now)

        ease_after_two = 2.5 - 0.32 - 0.32
        assert intervals == [1, 6, round(6 * ease_after_two)]
        assert intervals == [1, 6, 11]
        assert record.repetitions == 3
        assert record.ease_factor == pytest.approx(1.54)
        assert record.next_review == now + timedelta(days=11)

    def test_hard_shrinks_interval(self, now):
        _, intervals = review_sequence([Rating.HARD, Rating.HARD], now)
        assert intervals == [1, 5]

    def test_easy_grows_interval(self, now):
        _, intervals = review_sequence([Rating.EASY, Rating.EASY], now)
        assert intervals == [1, 8]

    def test_requires_item_id_without_record(self, now):
        with pytest.raises(ValueError):
            record_review(None, Rating.GOOD, now)

    def test_updates_in_place(self, now):
        record = SM2Record(item_id="x", next_review=now)
        updated, _ = record_review(record, Rating.GOOD, now)
        assert updated is record

    def test_accepts_plain_quality(self, now):
        record, _ = record_review(None, 2, now, item_id="x")
        assert record.repetitions == 1

    @pytest.mark.parametrize("repetitions, interval", [(0, 1), (1, 1), (2, 6), (7, 40)])
    def test_again_resets(self, now, repetitions, interval):
        record = SM2Record(item_id="x", next_review=now, repetitions=repetitions, interval=interval)
        record, next_review = record_review(record, Rating.AGAIN, now)

        assert record.repetitions == 0
        assert record.interval == 1
        assert next_review == now + timedelta(days=1)

    @pytest.mark.parametrize("repetitions, interval, ease_factor", [
        (0, 1, 2.5),
        (1, 1, 2.5),
        (2, 6, 1.3),
        (3, 15, 2.1),
        (5, 100, 2.8),
    ])
    def test_easy_at_least_good(self, now, repetitions, interval, ease_factor):
        prior = SM2Record(
            item_id="x", next_review=now, repetitions=repetitions,
            interval=interval, ease_factor=ease_factor,
        )
        good, _ = record_review(copy.deepcopy(prior), Rating.GOOD, now)
        easy, _ = record_review(copy.deepcopy(prior), Rating.EASY, now)
        assert easy.interval >= good.interval

    def test_replay_is_deterministic(self, now):
        prior = SM2Record(item_id="x", next_review=now, repetitions=2, interval=6, ease_factor=2.2)
        first, _ = record_review(copy.deepcopy(prior), Rating.HARD, now)
        second, _ = record_review(copy.deepcopy(prior), Rating.HARD, now)
        assert first == second

    def test_next_review_not_before_last_reviewed(self, now):
        record = None
        for rating in [Rating.AGAIN, Rating.HARD, Rating.GOOD, Rating.EASY]:
            record, next_review = record_review(record, rating, now, item_id="x")
            assert next_review >= record.last_reviewed
            assert record.interval >= 1


class TestDue:

    def test_absent_record_is_due(self, now):
        assert is_due(None, now)

    def test_exact_boundary_is_due(self, now):
        assert is_due(SM2Record(item_id="x", next_review=now), now)

    def test_future_not_due(self, now):
        assert not is_due(SM2Record(item_id="x", next_review=now + timedelta(seconds=1)), now)

    def test_learned(self, now):
        assert not SM2Record(item_id="x", next_review=now, interval=21).is_learned
        assert SM2Record(item_id="x", next_review=now, interval=22).is_learned


class TestSM2Scheduler:

    def test_stores_records_in_callers_mapping(self, now):
        store = {}
        scheduler = SM2Scheduler(store)
        record, _ = scheduler.record_review("a", Rating.GOOD, now)
        assert store["a"] is record

    def test_due_items(self, now):
        scheduler = SM2Scheduler()
        scheduler.record_review("a", Rating.GOOD, now)
        scheduler.record_review("b", Rating.GOOD, now - timedelta(days=3))

        assert scheduler.due_items(["a", "b", "c"], now) == ["b", "c"]
        assert scheduler.due_count(now) == 1
        assert scheduler.is_due("c", now)

    def test_counts(self, now):
        scheduler = SM2Scheduler({
            "a": SM2Record(item_id="a", next_review=now, interval=30, repetitions=4),
            "b": SM2Record(item_id="b", next_review=now, interval=6, repetitions=2),
        })
        assert scheduler.learned_count() == 1
        assert scheduler.total_reviews() == 6
