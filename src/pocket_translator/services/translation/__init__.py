"""Translation services - abstract interface and LLM endpoint implementation."""

from pocket_translator.services.translation.translation_service import TranslationService, TranslationResult
from pocket_translator.services.translation.completion_client import CompletionClient, CompletionResult, classify_status
from pocket_translator.services.translation.prompts import TranslationDirection
from pocket_translator.services.translation.llm_translation_service import LLMTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "CompletionClient",
    "CompletionResult",
    "classify_status",
    "TranslationDirection",
    "LLMTranslationService",
]
