#!/usr/bin/env python3
"""Tokenize or romanize Japanese text from the command line."""

import argparse
import sys
from typing import List, Optional

from romanji.logger import logger
from romanji.nlp import LexiconLoadError, get_romanizer, get_tokenizer
from romanji.nlp.japanese import Lexicon


def format_token(token) -> str:
    status = "found" if token.found else "unfound"
    return "\t".join([token.text, status, token.reading or "", token.gloss or ""])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tokenize or romanize Japanese text.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    romanize_parser = subparsers.add_parser("romanize", help="Convert text to romaji")
    romanize_parser.add_argument("text", help="Japanese text")
    romanize_parser.add_argument(
        "--backend",
        choices=["pykakasi", "janome", "none"],
        default=None,
        help="Kanji reading backend (defaults to ROMANJI_READING_BACKEND)",
    )

    tokenize_parser = subparsers.add_parser("tokenize", help="Split text into dictionary words")
    tokenize_parser.add_argument("text", help="Japanese text")
    tokenize_parser.add_argument(
        "--lexicon",
        default=None,
        help="Path to a word_dictionary.json file (defaults to ROMANJI_LEXICON_PATH)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "romanize":
        print(get_romanizer("ja", args.backend).romanize(args.text))
        return 0

    try:
        lexicon = Lexicon.from_json(args.lexicon) if args.lexicon else None
        tokenizer = get_tokenizer("ja", lexicon)
    except LexiconLoadError as e:
        logger.error(f"❌ {e}")
        return 1

    for token in tokenizer.tokenize(args.text):
        print(format_token(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())
