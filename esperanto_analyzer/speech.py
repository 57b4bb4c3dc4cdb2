"""
Word values attached to analysis results.

The analyzers never look inside these; they exist for callers who prefer
an object per word over the raw result fields.
"""

from dataclasses import dataclass

from .errors import EsperantoAnalysisError
from .types import PartOfSpeech


class InvalidArticleError(EsperantoAnalysisError):
    """Raised when an article other than "la" is requested."""

    def __init__(self, message: str, word: str = None):
        super().__init__(message, 'INVALID_ARTICLE', word)


@dataclass(frozen=True)
class Word:
    """A surface form tagged with its part of speech."""
    value: str
    part_of_speech: PartOfSpeech

    def __str__(self) -> str:
        return self.value


def create_word(value: str, part_of_speech) -> Word:
    """
    Build the Word value for a recognized tag.

    Unrecognized tags (including Unknown) produce an Undefined word.
    """
    try:
        pos = PartOfSpeech(part_of_speech)
    except ValueError:
        pos = PartOfSpeech.UNDEFINED
    if pos == PartOfSpeech.UNKNOWN:
        pos = PartOfSpeech.UNDEFINED

    if pos == PartOfSpeech.ARTICLE and value.lower() != 'la':
        raise InvalidArticleError(f'Invalid article: {value}. Only "la" is valid.', value)

    return Word(value, pos)
