"""
Esperanto morphological analyzer.

Rule-based part-of-speech tagging and feature extraction for Esperanto
words and sentences:

    >>> from esperanto_analyzer import analyze_word
    >>> analyze_word("hundojn").part_of_speech
    <PartOfSpeech.NOUN: 'Noun'>

The module-level functions share one WordAnalyzer and one SentenceAnalyzer,
built on first use.
"""

import logging
import threading
from typing import Dict, List

from .analyzer import WordAnalyzer
from .config import DEFAULT_VALIDITY_THRESHOLD
from .errors import EsperantoAnalysisError, PatternMismatchError, ValidationError
from .sentence_analyzer import SentenceAnalyzer
from .trace import AnalysisTrace
from .types import (
    AnalysisOptions,
    AnalysisResult,
    Morphology,
    PartOfSpeech,
    SentenceAnalysisOptions,
    SentenceAnalysisResult,
    SentenceStatistics,
)

VERSION = "1.0.0"
LIBRARY_NAME = "esperanto-analyzer"
SUPPORTED_LANGUAGE = "Esperanto"

__version__ = VERSION

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_word_analyzer = None
_sentence_analyzer = None


def get_word_analyzer() -> WordAnalyzer:
    """Shared WordAnalyzer, created once."""
    global _word_analyzer
    if _word_analyzer is None:
        with _lock:
            if _word_analyzer is None:
                _word_analyzer = WordAnalyzer()
    return _word_analyzer


def get_sentence_analyzer() -> SentenceAnalyzer:
    """Shared SentenceAnalyzer, created once on top of the shared WordAnalyzer."""
    global _sentence_analyzer
    if _sentence_analyzer is None:
        word_analyzer = get_word_analyzer()
        with _lock:
            if _sentence_analyzer is None:
                _sentence_analyzer = SentenceAnalyzer(word_analyzer)
    return _sentence_analyzer


def analyze_word(word: str, options: AnalysisOptions = None) -> AnalysisResult:
    """
    Analyze a single word.

    Raises:
        ValidationError: if word is not a string or is blank
    """
    return get_word_analyzer().analyze(word, options)


def analyze_word_all(word: str, options: AnalysisOptions = None) -> List[AnalysisResult]:
    """
    Every possible reading of a word, best first.

    Raises:
        ValidationError: if word is not a string or is blank
    """
    return get_word_analyzer().analyze_all(word, options)


def analyze_sentence(sentence: str, options: SentenceAnalysisOptions = None,
                     trace: AnalysisTrace = None) -> SentenceAnalysisResult:
    """
    Analyze every word of a sentence.

    Raises:
        ValidationError: if sentence is not a string or is blank
    """
    return get_sentence_analyzer().analyze_sentence(sentence, options, trace)


def analyze_paragraph(paragraph: str,
                      options: SentenceAnalysisOptions = None) -> List[SentenceAnalysisResult]:
    return get_sentence_analyzer().analyze_paragraph(paragraph, options)


def is_esperanto_word(word) -> bool:
    """True if any analyzer recognizes the word. Never raises."""
    try:
        return analyze_word(word).part_of_speech != PartOfSpeech.UNKNOWN
    except Exception as e:
        logger.debug(f"is_esperanto_word({word!r}) failed: {e}")
        return False


def is_esperanto_sentence(sentence, threshold: float = DEFAULT_VALIDITY_THRESHOLD) -> bool:
    """True if at least `threshold` of the words are recognized. Never raises."""
    return get_sentence_analyzer().is_valid_esperanto(sentence, threshold)


def get_part_of_speech_summary(sentence: str) -> Dict[str, int]:
    """Count of each part of speech in a sentence."""
    return get_sentence_analyzer().get_summary(sentence)


__all__ = [
    'VERSION',
    'LIBRARY_NAME',
    'SUPPORTED_LANGUAGE',
    'analyze_word',
    'analyze_word_all',
    'analyze_sentence',
    'analyze_paragraph',
    'is_esperanto_word',
    'is_esperanto_sentence',
    'get_part_of_speech_summary',
    'get_word_analyzer',
    'get_sentence_analyzer',
    'WordAnalyzer',
    'SentenceAnalyzer',
    'AnalysisTrace',
    'AnalysisOptions',
    'AnalysisResult',
    'Morphology',
    'PartOfSpeech',
    'SentenceAnalysisOptions',
    'SentenceAnalysisResult',
    'SentenceStatistics',
    'EsperantoAnalysisError',
    'PatternMismatchError',
    'ValidationError',
]
