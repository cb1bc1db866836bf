"""Translation Service - abstract interface for EN<->RU translation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pocket_translator.core import ErrorKind, TranslationRequest


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    attempts: int = 1

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating between English and Russian.

    Implementations (e.g., LLMTranslationService) handle the network calls.
    """

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request text.

        Args:
            request: Trimmed, length-checked text and its language pair.

        Returns:
            TranslationResult with text or error message.
        """
        pass
