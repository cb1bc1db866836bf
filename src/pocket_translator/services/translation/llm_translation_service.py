"""LLM Translation Service - Implements translation via the chat completion endpoint."""

import logging
from typing import Optional

from pocket_translator.core import Language, TranslationRequest
from pocket_translator.services.text_processing import TerminologyCorrector, normalize_completion
from pocket_translator.services.translation.completion_client import CompletionClient
from pocket_translator.services.translation.prompts import TranslationDirection
from pocket_translator.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class LLMTranslationService(TranslationService):
    """
    Translation service backed by the hosted LLM completion endpoint.

    The prompt depends on the source language: English input is rendered
    in feminine first person with informal address, Russian input in a
    neutral register. Russian output additionally goes through the
    terminology glossary.
    """

    def __init__(
        self,
        client: CompletionClient,
        corrector: Optional[TerminologyCorrector] = None,
    ):
        self.client = client
        self.corrector = corrector or TerminologyCorrector()

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request text.

        Args:
            request: Text and language pair, already validated by the caller.

        Returns:
            TranslationResult with the cleaned translation or the classified error.
        """
        direction = TranslationDirection.for_source(request.source_lang)
        logger.info(
            "Starting translation %s -> %s (%s, %d chars)",
            request.source_lang.value,
            request.target_lang.value,
            direction.value,
            len(request.text),
        )

        completion = await self.client.complete(direction.system_prompt, request.text.strip())

        if completion.is_error:
            return TranslationResult(
                text="",
                error=completion.error.message,
                error_kind=completion.error.kind,
                attempts=completion.attempts,
            )

        translation = normalize_completion(completion.text)
        translation = self.corrector.apply_corrections(
            translation,
            request.target_lang is Language.RUSSIAN,
        )
        logger.info("Translation successful after %d attempt(s)", completion.attempts)

        return TranslationResult(text=translation, attempts=completion.attempts)
