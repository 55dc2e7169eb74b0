"""Kanji detection and reading resolution.

Readings come from an external engine (pykakasi or janome); this module only
decides which spans are kanji and splices the readings back into the text.
"""

from typing import Iterable, Optional, Tuple

import jaconv
import pykakasi
from janome.tokenizer import Tokenizer

from romanji.nlp.base import BaseReadingResolver

# CJK Unified Ideographs and its extension blocks (A through J)
KANJI_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0x2CEB0, 0x2EBEF),
    (0x2EBF0, 0x2EE5F),
    (0x30000, 0x3134F),
    (0x31350, 0x323AF),
    (0x323B0, 0x3347F),
)


def is_kanji(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in KANJI_RANGES)


def contains_kanji(text: str) -> bool:
    return any(is_kanji(ch) for ch in text)


def _splice(text: str, segments: Iterable[Tuple[str, Optional[str]]]) -> str:
    """Rebuild *text*, swapping each segment surface for its replacement.

    Segments are located in order from a moving cursor; anything the engine
    dropped or normalised away (spaces, unknown symbols) is copied over from
    the original text so no character is lost.
    """
    pieces = []
    cursor = 0
    for surface, replacement in segments:
        if not surface:
            continue
        start = text.find(surface, cursor)
        if start < 0:
            continue
        pieces.append(text[cursor:start])
        pieces.append(replacement if replacement else surface)
        cursor = start + len(surface)
    pieces.append(text[cursor:])
    return "".join(pieces)


class PykakasiReadingResolver(BaseReadingResolver):
    """Kanji readings from pykakasi's segment conversion."""

    def __init__(self, kks=None):
        self._kks = kks or pykakasi.kakasi()

    def resolve_kanji_readings(self, text: str) -> str:
        if not contains_kanji(text):
            return text

        segments = []
        for item in self._kks.convert(text):
            orig = item.get("orig", "")
            segments.append((orig, item.get("hira") if contains_kanji(orig) else None))
        return _splice(text, segments)


class JanomeReadingResolver(BaseReadingResolver):
    """Kanji readings from janome's morphological analysis.

    Janome reports readings in katakana; they are converted to hiragana with
    jaconv before being spliced in.
    """

    def __init__(self, tokenizer=None):
        self._tokenizer = tokenizer or Tokenizer()

    def resolve_kanji_readings(self, text: str) -> str:
        if not contains_kanji(text):
            return text

        segments = []
        for token in self._tokenizer.tokenize(text, wakati=False):
            surface = token.surface
            reading = token.reading
            if contains_kanji(surface) and reading and reading != "*":
                segments.append((surface, jaconv.kata2hira(reading)))
            else:
                segments.append((surface, None))
        return _splice(text, segments)
