"""Environment-driven settings.

Only factories and command-line entry points read these values; the core
tokenizer, transliterator and schedulers always take explicit arguments.
"""

import os

from dotenv import load_dotenv

from romanji import LEXICON_PATH as DEFAULT_LEXICON_PATH

load_dotenv()

LEXICON_PATH = os.getenv("ROMANJI_LEXICON_PATH", DEFAULT_LEXICON_PATH)
READING_BACKEND = os.getenv("ROMANJI_READING_BACKEND", "pykakasi")  # pykakasi, janome, none
LOG_LEVEL = os.getenv("ROMANJI_LOG_LEVEL", "INFO").upper()
