"""Conjunction analyzer: a closed, case-insensitive vocabulary."""

import re

from ..types import ConjunctionMorphology, PartOfSpeech
from .base import LETTERS, InvariableAnalyzer

CONJUNCTIONS = (
    'antaŭ kiam',  # before
    'antaŭ ol',    # before
    'aŭ',          # or
    'ĉar',         # because
    'ĉu',          # whether
    'k',           # and (abbreviated)
    'kaj',         # and
    'kaŭ',         # and (alternative form)
    'ke',          # that
    'kial',        # why
    'kiam',        # when
    'kie',         # where
    'kiel',        # how, as
    'kune kun',    # together with
    'kvankam',     # although
    'kvazaŭ',      # as if
    'minus',       # minus
    'nek',         # neither, nor
    'ol',          # than
    'plus',        # plus
    'se',          # if
    'sed',         # but
    'tial',        # therefore
)


class ConjunctionAnalyzer(InvariableAnalyzer):
    name = "ConjunctionAnalyzer"
    part_of_speech = PartOfSpeech.CONJUNCTION

    match_regex = re.compile(f"^({'|'.join(CONJUNCTIONS)})$", re.IGNORECASE)

    # Compound conjunctions contain spaces
    valid_chars = re.compile(f"[{LETTERS}\\s]+")

    def _extract_features(self, word: str) -> ConjunctionMorphology:
        normalized = word.lower()
        return ConjunctionMorphology(
            root=normalized,
            is_plural=False,
            is_accusative=False,
            is_compound=' ' in normalized,
        )
