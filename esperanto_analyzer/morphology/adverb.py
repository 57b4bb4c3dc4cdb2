"""
Adverb analyzer.

Derived adverbs end in -e (bele, rapide, bone). A closed list of primary
adverbs (nun, tuj, hodiaŭ, ...) does not. Because nearly any word ending
in -e fits the regular shape, regular candidates must also look like
plausible Esperanto.
"""

import re

from ..errors import ValidationError
from ..types import AdverbMorphology, PartOfSpeech
from .base import InvariableAnalyzer

SPECIAL_ADVERBS = (
    'nun',          # now
    'tuj',          # immediately
    'jam',          # already
    'ankoraŭ',      # still, yet
    'baldaŭ',       # soon
    'hieraŭ',       # yesterday
    'hodiaŭ',       # today
    'morgaŭ',       # tomorrow
    'tre',          # very
    'pli',          # more
    'plej',         # most
    'tro',          # too (much)
    'nur',          # only
    'eĉ',           # even
    'preskaŭ',      # almost
    'apenaŭ',       # barely
    'ĉirkaŭ',       # around, approximately
    'jen',          # here is/are
    'for',          # away
    'hejm',         # home, homeward
    'eksteren',     # outside
    'supren',       # upward
    'malsupren',    # downward
    'antaŭen',      # forward
    'malantaŭen',   # backward
    'dekstren',     # rightward
    'maldekstren',  # leftward
    'ien',          # somewhere (direction)
    'nien',         # nowhere (direction)
    'tien',         # thither
    'ĉien',         # everywhere (direction)
)

ESPERANTO_CHARS = re.compile(r"[a-zĉĝĵĥŝŭ]+")

FOREIGN_LETTERS = re.compile(r"[qwxy]")

# Letter sequences common in English but rare or impossible in Esperanto
FOREIGN_PATTERNS = (
    re.compile(r"ouse$"),
    re.compile(r"tion"),
    re.compile(r"^th"),
    re.compile(r"ght"),
    re.compile(r"ple$"),
    re.compile(r"ble$"),
    re.compile(r"[^aeiouĉĝĵĥŝŭ]{3,}"),
)

DOUBLE_CONSONANT = re.compile(r"([bcdfghjklmnpqrstvwxyz])\1")


class AdverbAnalyzer(InvariableAnalyzer):
    name = "AdverbAnalyzer"
    part_of_speech = PartOfSpeech.ADVERB

    match_regex = re.compile(
        f"^({'|'.join(SPECIAL_ADVERBS)}|[a-zĉĝĵĥŝŭ]{{2,}}e)$",
        re.IGNORECASE,
    )

    def match(self, word: str) -> bool:
        if not super().match(word):
            return False

        if self.is_special(word):
            return True

        return self.has_esperanto_characters(word) and self.has_esperanto_phonology(word)

    @staticmethod
    def is_special(word: str) -> bool:
        return word.lower() in SPECIAL_ADVERBS

    @staticmethod
    def has_esperanto_characters(word: str) -> bool:
        return ESPERANTO_CHARS.fullmatch(word.lower()) is not None

    @staticmethod
    def has_esperanto_phonology(word: str) -> bool:
        """Reject regular -e candidates that look like English or other foreign words."""
        normalized = word.lower()

        # At least a three letter root before -e
        if len(normalized) < 4:
            return False

        if FOREIGN_LETTERS.search(normalized):
            return False

        if any(pattern.search(normalized) for pattern in FOREIGN_PATTERNS):
            return False

        if DOUBLE_CONSONANT.search(normalized):
            return False

        return True

    def extract_root(self, word: str) -> str:
        normalized = word.lower()
        if self.is_special(normalized):
            return normalized
        if normalized.endswith('e'):
            return normalized[:-1]
        return normalized

    def _extract_features(self, word: str) -> AdverbMorphology:
        return AdverbMorphology(
            root=self.extract_root(word),
            is_plural=False,
            is_accusative=False,
            is_special=self.is_special(word),
        )

    def validate_word(self, word: str) -> None:
        super().validate_word(word)
        if len(word) < 2:
            raise ValidationError("Adverb must be at least 2 characters long", word)
