"""Custom exceptions for the speech assessment engines."""
from typing import Optional


class SpeechCoachError(Exception):
    """Base exception for speech assessment errors."""
    pass


class InvalidArgumentError(SpeechCoachError, ValueError):
    """Raised when an input has the wrong shape or an impossible value."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


class GrammarResourceError(SpeechCoachError, LookupError):
    """Raised when the NLTK data needed for grammar scoring is missing."""

    def __init__(self, resource: str):
        self.resource = resource
        message = (
            f"NLTK resource '{resource}' is not downloaded. Run:\n"
            f"  python -c \"import nltk; nltk.download('{resource}')\""
        )
        super().__init__(message)


class AudioLoadError(SpeechCoachError, IOError):
    """Raised when an audio file cannot be decoded."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Failed to load audio '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
