"""Core domain models - pure data, no I/O."""

from .errors import ErrorKind, TranslationError
from .language import Language
from .translation_request import TranslationRequest

__all__ = ["ErrorKind", "Language", "TranslationError", "TranslationRequest"]
