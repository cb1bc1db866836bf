"""Text processing services - completion cleanup and terminology correction."""

from pocket_translator.services.text_processing.text_normalization import normalize_completion
from pocket_translator.services.text_processing.terminology import RUSSIAN_GLOSSARY, TerminologyCorrector

__all__ = [
    "normalize_completion",
    "RUSSIAN_GLOSSARY",
    "TerminologyCorrector",
]
