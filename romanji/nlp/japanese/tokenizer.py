"""Dictionary-driven Japanese tokenization."""

from dataclasses import dataclass
from typing import List, Optional

from romanji.nlp.base import BaseTokenizer
from .lexicon import Lexicon, WordEntry

# Structural characters emitted as standalone found tokens
JAPANESE_PUNCTUATION = frozenset("。、？！「」『』（）・〜… 　")

# Horizontal whitespace only; line breaks stay inside unfound runs
HORIZONTAL_WHITESPACE = frozenset("\t \u00a0\u3000")

STRUCTURAL_CHARACTERS = JAPANESE_PUNCTUATION | HORIZONTAL_WHITESPACE


def is_structural(char: str) -> bool:
    """True for Japanese punctuation, spaces and tabs."""
    return char in STRUCTURAL_CHARACTERS


@dataclass(frozen=True)
class Token:
    """A contiguous span of the tokenized input.

    ``found`` is True for lexicon matches and for punctuation/whitespace;
    only lexicon matches carry a reading, gloss and part of speech.
    """
    text: str
    found: bool
    reading: Optional[str] = None
    gloss: Optional[str] = None
    part_of_speech: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: WordEntry) -> "Token":
        return cls(
            text=entry.surface,
            found=True,
            reading=entry.reading,
            gloss=entry.gloss,
            part_of_speech=entry.part_of_speech,
        )

    @property
    def is_word(self) -> bool:
        return self.found and self.gloss is not None


class LexiconTokenizer(BaseTokenizer):
    """Greedy longest-match segmenter over a :class:`Lexicon`.

    Segmentation is total: joining the surfaces of the returned tokens gives
    back the input exactly. Characters the lexicon does not cover become
    ``unfound`` tokens, merged into one span per uninterrupted run.
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        position = 0

        while position < len(text):
            entry = self.lexicon.match_prefix(text, position)
            if entry is not None:
                tokens.append(Token.from_entry(entry))
                position += len(entry.surface)
                continue

            char = text[position]
            tokens.append(Token(text=char, found=is_structural(char)))
            position += 1

        return self._merge_unfound(tokens)

    @staticmethod
    def _merge_unfound(tokens: List[Token]) -> List[Token]:
        merged: List[Token] = []
        pending = ""

        for token in tokens:
            if not token.found:
                pending += token.text
                continue
            if pending:
                merged.append(Token(text=pending, found=False))
                pending = ""
            merged.append(token)

        if pending:
            merged.append(Token(text=pending, found=False))

        return merged
