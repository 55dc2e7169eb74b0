"""Test configuration and fixtures."""
import pytest
import os
import sys
from datetime import datetime, timezone
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romanji.nlp.japanese.lexicon import Lexicon


@pytest.fixture
def sample_entries():
    """Word entries as (surface, reading, gloss, part of speech) tuples."""
    return [
        ("東京", "toukyou", "Tokyo", "noun"),
        ("京", "kyou", "capital", "noun"),
        ("駅", "eki", "station", "noun"),
        ("は", "wa", "topic marker", "particle"),
        ("どこ", "doko", "where", "pronoun"),
        ("です", "desu", "to be (polite)", "copula"),
        ("ですか", "desuka", "is it?", "expression"),
    ]


@pytest.fixture
def sample_lexicon(sample_entries):
    """Lexicon built from the sample entries."""
    return Lexicon.load(sample_entries)


@pytest.fixture
def now():
    """Fixed review clock."""
    return datetime(2024, 4, 1, 9, 30, tzinfo=timezone.utc)
