from abc import ABC, abstractmethod

from .config import Settings
from .errors import EmptyInputError


def require_text(text, error=EmptyInputError, message: str = "Text is required") -> str:
    """Return `text` unchanged if it has non-whitespace content, else raise `error`."""
    if not isinstance(text, str) or not text.strip():
        raise error(message)
    return text


class TextModule(ABC):
    """
    Abstract base class for the text analysis modules.
    Each module implements its own 'analyze' method over a block of prose.
    """

    def __init__(self, settings: Settings = None):
        self.settings = settings if settings else Settings()

    @abstractmethod
    def analyze(self, text: str):
        """
        Analyzes the given text.

        Args:
            text (str): The prose to analyze. Blank text raises EmptyInputError.

        Returns:
            The module-specific result.
        """
