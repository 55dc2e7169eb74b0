"""Tests for kana → romaji transliteration."""
import pytest

from romanji.nlp.japanese.kana_tables import DIGRAPH_KANA, SINGLE_KANA
from romanji.nlp.japanese.transliterator import KanaTransliterator, transliterate


class TestKnownWords:

    @pytest.mark.parametrize("kana, romaji", [
        ("こんにちは", "konnichiwa"),
        ("がっこう", "gakkou"),
        ("すし", "sushi"),
        ("ありがとう", "arigatou"),
        ("きょうと", "kyouto"),
        ("しゃしん", "shashin"),
        ("ぴょん", "pyon"),
        ("カタカナ", "katakana"),
        ("ラーメン", "raamen"),
        ("コーヒー", "koohii"),
        ("パーティー", "paatii"),
        ("ファイル", "fairu"),
        ("ヴァイオリン", "vaiorin"),
        ("きって", "kitte"),
        ("ざっし", "zasshi"),
        ("マッチ", "macchi"),
        ("こんばんは", "konbanwa"),
        ("とうきょう", "toukyou"),
    ])
    def test_words(self, kana, romaji):
        assert transliterate(kana) == romaji

    def test_empty(self):
        assert transliterate("") == ""


class TestGemination:

    def test_small_tsu_at_end(self):
        assert transliterate("あっ") == "at"

    def test_small_tsu_before_vowel(self):
        assert transliterate("あっあ") == "ata"

    def test_katakana_small_tsu(self):
        assert transliterate("ベッド") == "beddo"

    def test_small_tsu_before_digraph(self):
        assert transliterate("いっしょ") == "issho"

    def test_small_tsu_before_non_kana(self):
        assert transliterate("っA") == "tA"

    def test_small_tsu_before_long_vowel_mark(self):
        assert transliterate("ッー") == "tu"


class TestLongVowelMark:

    def test_repeats_previous_vowel(self):
        assert transliterate("メール") == "meeru"

    def test_fallback_after_consonant(self):
        assert transliterate("ンー") == "nu"

    def test_fallback_at_start(self):
        assert transliterate("ー") == "u"


class TestPassThrough:

    def test_non_kana_unchanged(self):
        assert transliterate("Hello, 123!") == "Hello, 123!"

    def test_kanji_unchanged(self):
        assert transliterate("東京です") == "東京desu"

    def test_mixed_punctuation(self):
        assert transliterate("はい。いいえ？") == "hai。iie？"


class TestTables:

    def test_every_single_kana_transliterates_to_its_entry(self):
        for kana, romaji in SINGLE_KANA.items():
            assert transliterate(kana) == romaji

    def test_every_digraph_transliterates_to_its_entry(self):
        for kana, romaji in DIGRAPH_KANA.items():
            assert transliterate(kana) == romaji

    @pytest.mark.parametrize("start, end", [(0x3041, 0x3093), (0x30A1, 0x30F3)])
    def test_basic_kana_blocks_covered(self, start, end):
        """Every kana in the core hiragana/katakana blocks is mapped, except archaic forms."""
        archaic = set("ゎゐゑヮヰヱ")
        for code in range(start, end + 1):
            char = chr(code)
            if char in archaic or char in "っッ":
                continue
            assert char in SINGLE_KANA, char

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SINGLE_KANA["あ"] = "x"


class TestCustomTables:

    def test_custom_expressions(self):
        transliterator = KanaTransliterator(expressions={"では": "dewa"})
        assert transliterator.transliterate("では") == "dewa"
        assert transliterator.transliterate("こんにちは") == "konnichiha"

    def test_deterministic(self):
        transliterator = KanaTransliterator()
        assert transliterator.transliterate("がっこう") == transliterator.transliterate("がっこう")
