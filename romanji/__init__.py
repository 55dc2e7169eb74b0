import os

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'romanji')
DATA_DIR = os.path.abspath(os.path.join(BASE_DIR, '..', 'data'))

# Bundled word dictionary in the app's JSON format
LEXICON_PATH = os.path.join(DATA_DIR, 'word_dictionary.json')
