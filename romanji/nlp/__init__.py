"""Natural Language Processing module for romanji

This module provides language-specific text processing capabilities including
dictionary tokenization, kanji reading resolution and romanization.
"""

from typing import Optional

from .base import (
    BaseReadingResolver,
    BaseRomanizer,
    BaseTokenizer,
    BaseTransliterator,
    LexiconLoadError,
)


def _check_language(language: str) -> None:
    if language.lower() not in ['ja', 'jp']:
        raise ValueError(f"Unsupported language: {language}")


def get_tokenizer(language: str, lexicon=None) -> BaseTokenizer:
    """Get a dictionary tokenizer for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)
        lexicon: Lexicon to match against; loaded from the configured
            lexicon path when omitted

    Returns:
        Language-specific tokenizer instance

    Raises:
        ValueError: If language is not supported
        LexiconLoadError: If the configured lexicon cannot be loaded
    """
    _check_language(language)

    from .japanese.lexicon import Lexicon
    from .japanese.tokenizer import LexiconTokenizer
    if lexicon is None:
        from romanji.config import LEXICON_PATH
        lexicon = Lexicon.from_json(LEXICON_PATH)
    return LexiconTokenizer(lexicon)


def get_transliterator(language: str) -> BaseTransliterator:
    """Get a script-to-Latin transliterator for the specified language.

    Raises:
        ValueError: If language is not supported
    """
    _check_language(language)

    from .japanese.transliterator import KanaTransliterator
    return KanaTransliterator()


def get_reading_resolver(backend: Optional[str] = None) -> Optional[BaseReadingResolver]:
    """Get a kanji reading resolver.

    Args:
        backend: 'pykakasi', 'janome', or 'none'; defaults to the configured backend

    Returns:
        Resolver instance, or None when reading resolution is disabled

    Raises:
        ValueError: If backend is not supported
    """
    if backend is None:
        from romanji.config import READING_BACKEND
        backend = READING_BACKEND
    backend = backend.lower()

    if backend == 'pykakasi':
        from .japanese.kanji import PykakasiReadingResolver
        return PykakasiReadingResolver()
    elif backend == 'janome':
        from .japanese.kanji import JanomeReadingResolver
        return JanomeReadingResolver()
    elif backend in ['none', '']:
        return None
    else:
        raise ValueError(f"Unsupported reading backend: {backend}")


def get_romanizer(language: str, backend: Optional[str] = None) -> BaseRomanizer:
    """Get a full romanization pipeline for the specified language.

    Raises:
        ValueError: If language or backend is not supported
    """
    _check_language(language)

    from .japanese.romanizer import JapaneseRomanizer
    return JapaneseRomanizer(resolver=get_reading_resolver(backend))


__all__ = [
    'BaseReadingResolver',
    'BaseRomanizer',
    'BaseTokenizer',
    'BaseTransliterator',
    'LexiconLoadError',
    'get_tokenizer',
    'get_transliterator',
    'get_reading_resolver',
    'get_romanizer',
]
