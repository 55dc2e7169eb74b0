from abc import ABC, abstractmethod
from typing import List, Optional


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class LexiconLoadError(Exception):
    """Raised when a lexicon data source cannot be read or is malformed."""
    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load lexicon from '{source}': {reason}")
        self.source = source
        self.reason = reason


class BaseTokenizer(ABC):
    """Abstract base class for text tokenization"""

    @abstractmethod
    def tokenize(self, text: str) -> List:
        """Tokenize text into a lossless sequence of tokens"""
        pass


class BaseTransliterator(ABC):
    """Abstract base class for script-to-Latin transliteration"""

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """Convert phonetic script to Latin text, passing unknown characters through"""
        pass


class BaseReadingResolver(ABC):
    """Abstract base class for kanji reading capabilities.

    Implementations replace kanji spans with their phonetic reading and leave
    every other character, including spacing, exactly where it was.
    """

    @abstractmethod
    def resolve_kanji_readings(self, text: str) -> str:
        """Return *text* with kanji spans replaced by readings"""
        pass


class BaseRomanizer(ABC):
    """Abstract base class for full text-to-Latin pipelines"""

    def __init__(self, resolver: Optional[BaseReadingResolver] = None):
        self.resolver = resolver

    @abstractmethod
    def romanize(self, text: str) -> str:
        """Romanize *text*, resolving readings first when a resolver is available"""
        pass
