"""Spaced-repetition scheduling.

Two independent policies live here and share no record type:

- :mod:`romanji.srs.mastery`: binary correct/incorrect mastery tracker
- :mod:`romanji.srs.sm2`: four-button SM-2 variant
"""
