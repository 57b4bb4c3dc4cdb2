"""
Error types raised by the analyzer.

Only ValidationError is ever surfaced to callers of the public functions.
Everything else is raised inside a single part-of-speech analyzer and is
contained by the word or sentence analyzer.
"""


class EsperantoAnalysisError(Exception):
    """Base class for all analysis errors."""

    def __init__(self, message: str, code: str, word: str = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.word = word

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code='{self.code}', word={self.word!r})"


class ValidationError(EsperantoAnalysisError):
    """Invalid input: not a string, empty, or containing disallowed characters."""

    def __init__(self, message: str, word: str = None):
        super().__init__(message, 'VALIDATION_ERROR', word)


class PatternMismatchError(EsperantoAnalysisError):
    """Feature extraction was requested for a word the analyzer does not match."""

    def __init__(self, message: str, word: str = None):
        super().__init__(message, 'PATTERN_MISMATCH', word)
