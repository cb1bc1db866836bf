from dataclasses import dataclass

from .language import Language


@dataclass(frozen=True)
class TranslationRequest:
    """
    A single translation request.

    The caller builds this right before invoking the pipeline. Text is
    expected to be trimmed, non-empty and at most 5000 characters; the
    pipeline does not check again.
    """

    text: str
    source_lang: Language
    target_lang: Language
