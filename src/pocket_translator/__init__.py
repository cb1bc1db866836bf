"""
Pocket Translator - English/Russian translation through a hosted LLM.

This package provides:
- A retrying, deadline-bounded client for the completion endpoint
- Direction-aware prompts (feminine first person when translating into Russian)
- Completion cleanup and Russian terminology correction
- A Qt coordinator that validates input and runs translations off the UI thread
"""

__version__ = "0.1.0"

# Make key components available at package level
from pocket_translator.core import ErrorKind, Language, TranslationError, TranslationRequest
from pocket_translator.services import LLMTranslationService, TranslationResult

__all__ = [
    "ErrorKind",
    "Language",
    "TranslationError",
    "TranslationRequest",
    "LLMTranslationService",
    "TranslationResult",
]
