"""Japanese word lexicon backed by an immutable surface-form mapping."""

from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from romanji.logger import logger
from romanji.nlp.base import LexiconLoadError


class WordEntry(BaseModel):
    """A single dictionary word.

    Field aliases match the keys used by the app's ``word_dictionary.json``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    surface: str = Field(alias="japanese", min_length=1)
    reading: str = Field(alias="romaji")
    gloss: str = Field(alias="english")
    part_of_speech: str = Field(alias="partOfSpeech")


EntryLike = Union[WordEntry, Mapping[str, Any], Tuple[str, str, str, str]]

_ENTRY_LIST = TypeAdapter(List[WordEntry])


def _coerce_entry(raw: EntryLike) -> WordEntry:
    if isinstance(raw, WordEntry):
        return raw
    if isinstance(raw, Mapping):
        return WordEntry.model_validate(raw)
    if not isinstance(raw, (tuple, list)):
        raise TypeError(f"expected an entry, mapping or 4-tuple, got {type(raw).__name__}")
    surface, reading, gloss, part_of_speech = raw
    return WordEntry(
        surface=surface, reading=reading, gloss=gloss, part_of_speech=part_of_speech
    )


class Lexicon:
    """Read-only mapping from surface form to :class:`WordEntry`.

    The key ordering used for longest-match lookups is computed once here and
    never again, so a single instance can be shared between callers.
    """

    def __init__(self, entries: Mapping[str, WordEntry]):
        self._entries = MappingProxyType(dict(entries))
        # Python's sort is stable, so equal-length keys keep insertion order.
        self._sorted_keys: Tuple[str, ...] = tuple(
            sorted(self._entries, key=len, reverse=True)
        )
        self._key_lengths: Tuple[int, ...] = tuple(
            sorted({len(key) for key in self._entries}, reverse=True)
        )

    @classmethod
    def load(cls, entries: Iterable[EntryLike], source: str = "<entries>") -> "Lexicon":
        """Build a lexicon; later duplicates of a surface form overwrite earlier ones."""
        mapping = {}
        for index, raw in enumerate(entries):
            try:
                entry = _coerce_entry(raw)
            except (ValidationError, TypeError, ValueError) as e:
                raise LexiconLoadError(source, f"entry {index} is malformed: {e}") from e
            if entry.surface in mapping:
                logger.debug(f"Duplicate lexicon key '{entry.surface}' overwritten")
            mapping[entry.surface] = entry

        logger.info(f"Loaded {len(mapping)} lexicon entries from {source}")
        return cls(mapping)

    @classmethod
    def from_json(cls, path: str) -> "Lexicon":
        """Load a JSON array of word entries from *path*."""
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise LexiconLoadError(path, str(e)) from e

        try:
            entries = _ENTRY_LIST.validate_json(raw)
        except ValidationError as e:
            raise LexiconLoadError(path, str(e)) from e

        return cls.load(entries, source=path)

    @property
    def sorted_keys(self) -> Tuple[str, ...]:
        """All surface forms, longest first."""
        return self._sorted_keys

    def lookup(self, surface: str) -> Optional[WordEntry]:
        return self._entries.get(surface)

    def match_prefix(self, text: str, start: int = 0) -> Optional[WordEntry]:
        """Return the longest entry whose surface is a prefix of ``text[start:]``.

        Walking the distinct key lengths from longest to shortest gives the
        same first hit as scanning :attr:`sorted_keys` in order, since at most
        one key of each length can be a prefix at a given position.
        """
        remaining = len(text) - start
        for length in self._key_lengths:
            if length > remaining:
                continue
            entry = self._entries.get(text[start:start + length])
            if entry is not None:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, surface: object) -> bool:
        return surface in self._entries

    def __iter__(self):
        return iter(self._entries.values())


@dataclass(frozen=True)
class MissedWord:
    word: str
    context: str
    timestamp: datetime


class MissedWordLog:
    """Words a learner looked up without finding a definition.

    Each word is kept once, with the context it was first missed in.
    """

    def __init__(self, entries: Optional[Iterable[MissedWord]] = None):
        self._entries: List[MissedWord] = list(entries or [])

    def record(self, word: str, context: str, now: Optional[datetime] = None) -> bool:
        """Add *word* unless it is empty or already logged. Returns True if added."""
        if not word:
            return False
        if any(missed.word == word for missed in self._entries):
            return False

        self._entries.append(
            MissedWord(word=word, context=context, timestamp=now or datetime.now(timezone.utc))
        )
        logger.info(f"Missed word logged: '{word}'")
        return True

    @property
    def entries(self) -> Tuple[MissedWord, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return any(missed.word == word for missed in self._entries)
