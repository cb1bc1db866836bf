"""Services layer - business logic and external integrations."""

from pocket_translator.services.settings_manager import SettingsManager

# Text processing services
from pocket_translator.services.text_processing import normalize_completion, TerminologyCorrector, RUSSIAN_GLOSSARY

# Translation services
from pocket_translator.services.translation import (
	CompletionClient,
	CompletionResult,
	LLMTranslationService,
	TranslationDirection,
	TranslationResult,
	TranslationService,
	classify_status,
)

from pocket_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"normalize_completion",
	"TerminologyCorrector",
	"RUSSIAN_GLOSSARY",
	"CompletionClient",
	"CompletionResult",
	"LLMTranslationService",
	"TranslationDirection",
	"TranslationResult",
	"TranslationService",
	"classify_status",
	"TranslationWorker",
	"WorkerSignals",
]
