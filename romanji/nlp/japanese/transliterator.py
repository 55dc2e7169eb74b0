"""Table-driven kana → romaji transliteration."""

from typing import List, Mapping, Optional

from romanji.nlp.base import BaseTransliterator
from .kana_tables import (
    DIGRAPH_KANA,
    EXPRESSIONS,
    LONG_VOWEL_MARK,
    SINGLE_KANA,
    SMALL_TSU,
    VOWELS,
)

# Emitted for a small tsu with nothing consonantal to double
GEMINATION_FALLBACK = "t"
# Emitted for ー when the output so far does not end in a vowel
LONG_VOWEL_FALLBACK = "u"


class KanaTransliterator(BaseTransliterator):
    """Convert hiragana and katakana to Hepburn-style romaji.

    Any character missing from the tables (kanji, Latin letters, digits,
    punctuation) is copied to the output unchanged.

    At each position the converter tries, in order: a set expression, a
    two-kana digraph, the small tsu, the long-vowel mark ``ー``, and finally
    the single-kana table.
    """

    def __init__(
        self,
        single: Mapping[str, str] = SINGLE_KANA,
        digraphs: Mapping[str, str] = DIGRAPH_KANA,
        expressions: Mapping[str, str] = EXPRESSIONS,
    ):
        self.single = single
        self.digraphs = digraphs
        self.expressions = expressions
        self._expression_lengths = sorted({len(k) for k in expressions}, reverse=True)

    def transliterate(self, text: str) -> str:
        pieces: List[str] = []
        position = 0

        while position < len(text):
            expression = self._match_expression(text, position)
            if expression is not None:
                pieces.append(self.expressions[expression])
                position += len(expression)
                continue

            pair = text[position:position + 2]
            if len(pair) == 2 and pair in self.digraphs:
                pieces.append(self.digraphs[pair])
                position += 2
                continue

            char = text[position]
            if char in SMALL_TSU:
                pieces.append(self._geminate(text, position + 1))
            elif char == LONG_VOWEL_MARK:
                pieces.append(self._prolong(pieces))
            else:
                pieces.append(self.single.get(char, char))
            position += 1

        return "".join(pieces)

    def _match_expression(self, text: str, position: int) -> Optional[str]:
        for length in self._expression_lengths:
            candidate = text[position:position + length]
            if len(candidate) == length and candidate in self.expressions:
                return candidate
        return None

    def _lookahead(self, text: str, position: int) -> Optional[str]:
        """Romaji of the kana at *position*, digraphs first."""
        if position >= len(text):
            return None
        pair = text[position:position + 2]
        if len(pair) == 2 and pair in self.digraphs:
            return self.digraphs[pair]
        return self.single.get(text[position])

    def _geminate(self, text: str, next_position: int) -> str:
        following = self._lookahead(text, next_position)
        if following and following[0].isalpha() and following[0] not in VOWELS:
            return following[0]
        return GEMINATION_FALLBACK

    @staticmethod
    def _prolong(pieces: List[str]) -> str:
        last = pieces[-1][-1:] if pieces else ""
        return last if last in VOWELS else LONG_VOWEL_FALLBACK


_default = KanaTransliterator()


def transliterate(text: str) -> str:
    """Transliterate *text* with the default Hepburn tables."""
    return _default.transliterate(text)
