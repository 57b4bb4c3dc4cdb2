"""
Interjection analyzer.

Interjections are matched by exact (case-insensitive) lookup, most of them
including their exclamation mark.
"""

import re

from ..types import InterjectionMorphology, PartOfSpeech
from .base import LETTERS, InvariableAnalyzer

INTERJECTIONS = (
    'aĥ!',          # ah! (pain, regret)
    'aj!',          # ouch!
    'ba!',          # bah!
    'baf!',         # bang!
    'baj!',         # bye!
    'be!',          # bah! (contempt)
    'bis!',         # encore!
    'diable!',      # darn!
    'ek!',          # go! start!
    'fi!',          # fie! (disgust)
    'fu!',          # ugh!
    'ĝis!',         # goodbye!
    'ha!',          # ha!
    'ha lo!',       # hello!
    'he!',          # hey!
    'hej!',         # hey! hi!
    'ho!',          # oh!
    'ho ve!',       # alas!
    'hoj!',         # ahoy!
    'hola!',        # hello!
    'hu!',          # whew!
    'hup!',         # hop!
    'hura!',        # hurrah!
    'lo!',          # look!
    'lu lu!',       # lullaby
    'nu!',          # well!
    'uf!',          # oof!
    'up!',          # up!
    'ŭa!',          # wow!
    've!',          # woe!
    'volapukaĵo!',  # nonsense!
    'jen',          # here is/are
)

_INTERJECTION_SET = frozenset(INTERJECTIONS)


class InterjectionAnalyzer(InvariableAnalyzer):
    name = "InterjectionAnalyzer"
    part_of_speech = PartOfSpeech.INTERJECTION

    valid_chars = re.compile(f"[{LETTERS}\\s!]+")

    def match(self, word: str) -> bool:
        return word.lower() in _INTERJECTION_SET

    def _extract_features(self, word: str) -> InterjectionMorphology:
        normalized = word.lower()
        return InterjectionMorphology(
            root=normalized,
            is_plural=False,
            is_accusative=False,
            has_exclamation='!' in word,
            is_compound=' ' in normalized,
        )
