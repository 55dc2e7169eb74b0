"""Japanese language processing module."""

from .lexicon import Lexicon, MissedWord, MissedWordLog, WordEntry
from .tokenizer import JAPANESE_PUNCTUATION, LexiconTokenizer, Token
from .transliterator import KanaTransliterator, transliterate
from .kanji import JanomeReadingResolver, PykakasiReadingResolver, contains_kanji, is_kanji
from .romanizer import JapaneseRomanizer

__all__ = [
    'Lexicon',
    'MissedWord',
    'MissedWordLog',
    'WordEntry',
    'JAPANESE_PUNCTUATION',
    'LexiconTokenizer',
    'Token',
    'KanaTransliterator',
    'transliterate',
    'JanomeReadingResolver',
    'PykakasiReadingResolver',
    'contains_kanji',
    'is_kanji',
    'JapaneseRomanizer',
]
