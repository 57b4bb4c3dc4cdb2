"""
Part-of-speech analyzers.

ALL_ANALYZERS fixes the order in which the word analyzer tries them; it is
also the tie-break when two analyzers score the same.
"""

from .adjective import AdjectiveAnalyzer
from .adverb import AdverbAnalyzer
from .article import ArticleAnalyzer
from .base import MorphologicalAnalyzer
from .conjunction import ConjunctionAnalyzer
from .interjection import InterjectionAnalyzer
from .noun import NounAnalyzer
from .numeral import BASIC_NUMBERS, NumeralAnalyzer
from .preposition import PrepositionAnalyzer
from .pronoun import CORRELATIVES, PronounAnalyzer
from .verb import VerbAnalyzer

ALL_ANALYZERS = (
    NounAnalyzer,
    VerbAnalyzer,
    AdjectiveAnalyzer,
    AdverbAnalyzer,
    ArticleAnalyzer,
    ConjunctionAnalyzer,
    InterjectionAnalyzer,
    NumeralAnalyzer,
    PrepositionAnalyzer,
    PronounAnalyzer,
)

__all__ = [
    'ALL_ANALYZERS',
    'BASIC_NUMBERS',
    'CORRELATIVES',
    'MorphologicalAnalyzer',
    'AdjectiveAnalyzer',
    'AdverbAnalyzer',
    'ArticleAnalyzer',
    'ConjunctionAnalyzer',
    'InterjectionAnalyzer',
    'NounAnalyzer',
    'NumeralAnalyzer',
    'PrepositionAnalyzer',
    'PronounAnalyzer',
    'VerbAnalyzer',
]
