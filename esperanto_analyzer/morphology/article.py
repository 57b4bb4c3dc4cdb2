"""Analyzer for "la", the only (and invariable) article in Esperanto."""

import re

from ..errors import ValidationError
from ..types import ArticleMorphology, PartOfSpeech
from .base import InvariableAnalyzer


class ArticleAnalyzer(InvariableAnalyzer):
    name = "ArticleAnalyzer"
    part_of_speech = PartOfSpeech.ARTICLE

    match_regex = re.compile(r"^la$", re.IGNORECASE)

    def extract_root(self, word: str) -> str:
        return 'la'

    def _extract_features(self, word: str) -> ArticleMorphology:
        return ArticleMorphology(root='la', is_plural=False, is_accusative=False)

    def validate_word(self, word: str) -> None:
        super().validate_word(word)
        if word.lower() != 'la':
            raise ValidationError('Invalid article: only "la" is valid in Esperanto', word)
