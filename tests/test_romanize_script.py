"""Tests for the romanize.py command-line script."""
import json
import pytest

import romanize


class TestRomanizeCommand:

    def test_romanize_without_backend(self, capsys):
        assert romanize.main(["romanize", "がっこう", "--backend", "none"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "gakkou"

    def test_unknown_backend_rejected(self):
        with pytest.raises(SystemExit):
            romanize.main(["romanize", "がっこう", "--backend", "mecab"])


class TestTokenizeCommand:

    def test_tokenize_with_lexicon_file(self, tmp_path, capsys):
        path = tmp_path / "words.json"
        path.write_text(json.dumps([
            {"japanese": "駅", "romaji": "eki", "english": "station", "partOfSpeech": "noun"},
        ], ensure_ascii=False), encoding="utf-8")

        assert romanize.main(["tokenize", "駅前。", "--lexicon", str(path)]) == 0
        lines = [line for line in capsys.readouterr().out.splitlines() if "\t" in line]
        assert lines == [
            "駅\tfound\teki\tstation",
            "前\tunfound\t\t",
            "。\tfound\t\t",
        ]

    def test_tokenize_with_bundled_lexicon(self, capsys):
        assert romanize.main(["tokenize", "東京駅"]) == 0
        lines = [line for line in capsys.readouterr().out.splitlines() if "\t" in line]
        assert [line.split("\t")[0] for line in lines] == ["東京", "駅"]

    def test_bad_lexicon_returns_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")
        assert romanize.main(["tokenize", "駅", "--lexicon", str(path)]) == 1
