"""Japanese text → romaji pipeline."""

from typing import Optional

from romanji.logger import logger
from romanji.nlp.base import BaseReadingResolver, BaseRomanizer, BaseTransliterator
from .transliterator import KanaTransliterator


class JapaneseRomanizer(BaseRomanizer):
    """Resolve kanji readings (when a resolver is available), then transliterate kana.

    Without a resolver the text goes straight to the transliterator and kanji
    come out unchanged.
    """

    def __init__(
        self,
        resolver: Optional[BaseReadingResolver] = None,
        transliterator: Optional[BaseTransliterator] = None,
    ):
        super().__init__(resolver)
        self.transliterator = transliterator or KanaTransliterator()

    def resolve(self, text: str) -> str:
        if self.resolver is None:
            return text
        try:
            return self.resolver.resolve_kanji_readings(text)
        except Exception as e:
            # Reading engine hiccup → graceful degradation.
            logger.warning(f"Kanji reading resolution failed for '{text}': {e}")
            return text

    def romanize(self, text: str) -> str:
        if not text:
            return ""
        return self.transliterator.transliterate(self.resolve(text))
