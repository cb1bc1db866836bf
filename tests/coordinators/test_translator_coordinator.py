"""Unit tests for TranslatorCoordinator."""

import gc
import weakref
from unittest.mock import AsyncMock, MagicMock

import pytest

from pocket_translator.coordinators import TranslatorCoordinator
from pocket_translator.coordinators.translator_coordinator import (
    EMPTY_INPUT_MESSAGE,
    INPUT_TOO_LONG_MESSAGE,
    _PendingTranslation,
)
from pocket_translator.core import ErrorKind, Language
from pocket_translator.services import TranslationResult


@pytest.fixture
def mock_translation_service():
    """Provide a mocked TranslationService."""
    service = MagicMock()
    service.translate = AsyncMock(return_value=TranslationResult(text="Привет"))
    return service


@pytest.fixture
def coordinator(mock_translation_service):
    """Create a TranslatorCoordinator whose thread pool only records workers."""
    coordinator = TranslatorCoordinator(translation_service=mock_translation_service)
    coordinator.thread_pool = MagicMock()
    return coordinator


def started_worker(coordinator, index=-1):
    """Return a worker handed to the thread pool."""
    return coordinator.thread_pool.start.call_args_list[index][0][0]


class TestTranslatorCoordinatorInitialization:

    def test_default_direction_is_english_to_russian(self, coordinator):
        assert coordinator.source_lang is Language.ENGLISH
        assert coordinator.target_lang is Language.RUSSIAN

    def test_starts_empty(self, coordinator):
        assert coordinator.input_text == ""
        assert coordinator.translated_text == ""
        assert not coordinator.is_busy()


class TestTranslatorCoordinatorValidation:
    """Input is rejected before any worker starts."""

    def test_empty_input_rejected(self, coordinator, mock_translation_service):
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.request_translation()

        failed_spy.assert_called_once_with(EMPTY_INPUT_MESSAGE)
        coordinator.thread_pool.start.assert_not_called()
        mock_translation_service.translate.assert_not_called()

    def test_whitespace_only_input_rejected(self, coordinator):
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.set_input_text("   \n\t ")
        coordinator.request_translation()

        failed_spy.assert_called_once_with(EMPTY_INPUT_MESSAGE)
        coordinator.thread_pool.start.assert_not_called()

    def test_input_over_limit_rejected(self, coordinator, mock_translation_service):
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.set_input_text("a" * 5001)
        coordinator.request_translation()

        failed_spy.assert_called_once_with(INPUT_TOO_LONG_MESSAGE)
        coordinator.thread_pool.start.assert_not_called()
        mock_translation_service.translate.assert_not_called()

    def test_input_at_limit_accepted(self, coordinator):
        coordinator.set_input_text("a" * 5000)
        coordinator.request_translation()
        coordinator.thread_pool.start.assert_called_once()

    def test_limit_applies_after_trimming(self, coordinator):
        coordinator.set_input_text("  " + "a" * 5000 + "  ")
        coordinator.request_translation()
        coordinator.thread_pool.start.assert_called_once()


class TestTranslatorCoordinatorTranslation:

    def test_request_builds_trimmed_request(self, coordinator):
        coordinator.set_input_text("  hello  ")
        coordinator.request_translation()

        request = started_worker(coordinator).request
        assert request.text == "hello"
        assert request.source_lang is Language.ENGLISH
        assert request.target_lang is Language.RUSSIAN

    def test_request_emits_started_and_clears_previous_result(self, coordinator):
        coordinator.translated_text = "old"
        started_spy = MagicMock()
        coordinator.translation_started.connect(started_spy)

        coordinator.set_input_text("hello")
        coordinator.request_translation()

        started_spy.assert_called_once()
        assert coordinator.translated_text == ""
        assert coordinator.is_busy()

    def test_successful_result_is_stored_and_emitted(self, coordinator, mock_translation_service):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)

        coordinator.set_input_text("hello")
        coordinator.request_translation()
        started_worker(coordinator).run()

        mock_translation_service.translate.assert_awaited_once()
        completed_spy.assert_called_once_with("Привет")
        assert coordinator.translated_text == "Привет"
        assert not coordinator.is_busy()

    def test_error_result_emits_failure(self, coordinator, mock_translation_service):
        mock_translation_service.translate.return_value = TranslationResult(
            text="",
            error="Service unavailable. Please try again in a moment.",
            error_kind=ErrorKind.SERVICE_UNAVAILABLE,
        )
        failed_spy = MagicMock()
        completed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)
        coordinator.translation_completed.connect(completed_spy)

        coordinator.set_input_text("hello")
        coordinator.request_translation()
        started_worker(coordinator).run()

        failed_spy.assert_called_once_with("Service unavailable. Please try again in a moment.")
        completed_spy.assert_not_called()
        assert coordinator.translated_text == ""

    def test_worker_exception_emits_failure(self, coordinator, mock_translation_service):
        mock_translation_service.translate.side_effect = RuntimeError("boom")
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)

        coordinator.set_input_text("hello")
        coordinator.request_translation()
        started_worker(coordinator).run()

        failed_spy.assert_called_once_with("Unexpected translation error: boom")

    def test_stale_result_is_ignored(self, coordinator):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)

        coordinator.set_input_text("first")
        coordinator.request_translation()
        first = started_worker(coordinator, 0)

        coordinator.set_input_text("second")
        coordinator.request_translation()
        second = started_worker(coordinator, 1)

        first.run()
        completed_spy.assert_not_called()

        second.run()
        completed_spy.assert_called_once_with("Привет")

    def test_result_after_clear_is_ignored(self, coordinator):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)

        coordinator.set_input_text("hello")
        coordinator.request_translation()
        coordinator.clear()
        started_worker(coordinator).run()

        completed_spy.assert_not_called()
        assert coordinator.translated_text == ""


class TestTranslatorCoordinatorLanguages:

    def test_swap_exchanges_languages_and_clears(self, coordinator):
        changed_spy = MagicMock()
        coordinator.languages_changed.connect(changed_spy)
        coordinator.set_input_text("hello")
        coordinator.translated_text = "привет"

        coordinator.swap_languages()

        assert coordinator.source_lang is Language.RUSSIAN
        assert coordinator.target_lang is Language.ENGLISH
        assert coordinator.input_text == ""
        assert coordinator.translated_text == ""
        changed_spy.assert_called_once_with(Language.RUSSIAN, Language.ENGLISH)

    def test_swap_twice_restores_direction(self, coordinator):
        coordinator.swap_languages()
        coordinator.swap_languages()
        assert coordinator.source_lang is Language.ENGLISH
        assert coordinator.target_lang is Language.RUSSIAN

    def test_swapped_direction_is_used_for_requests(self, coordinator):
        coordinator.swap_languages()
        coordinator.set_input_text("Привет")
        coordinator.request_translation()

        request = started_worker(coordinator).request
        assert request.source_lang is Language.RUSSIAN
        assert request.target_lang is Language.ENGLISH

    def test_same_language_pair_is_not_rejected(self, mock_translation_service):
        coordinator = TranslatorCoordinator(
            translation_service=mock_translation_service,
            source_lang=Language.ENGLISH,
            target_lang=Language.ENGLISH,
        )
        coordinator.thread_pool = MagicMock()
        coordinator.set_input_text("hello")
        coordinator.request_translation()
        coordinator.thread_pool.start.assert_called_once()


class TestPendingTranslation:
    """The per-request helper forwards worker output without owning the coordinator."""

    def test_forwards_result_to_live_coordinator(self, coordinator):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)
        coordinator.set_input_text("hello")
        coordinator.request_translation()

        helper = coordinator._translation_request_helper
        helper.on_translation_result(TranslationResult(text="Hi"))

        completed_spy.assert_called_once_with("Hi")
        assert coordinator.translated_text == "Hi"

    def test_forwards_error_to_live_coordinator(self, coordinator):
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)
        coordinator.set_input_text("hello")
        coordinator.request_translation()

        coordinator._translation_request_helper.on_translation_error("boom")

        failed_spy.assert_called_once_with("boom")
        assert not coordinator.is_busy()

    def test_does_not_keep_coordinator_alive(self, mock_translation_service):
        coordinator = TranslatorCoordinator(translation_service=mock_translation_service)
        helper = _PendingTranslation(1, coordinator)
        coordinator_ref = weakref.ref(coordinator)

        del coordinator
        gc.collect()

        assert coordinator_ref() is None
        assert helper.parent_ref() is None

    def test_output_after_coordinator_is_gone_is_dropped(self, mock_translation_service):
        coordinator = TranslatorCoordinator(translation_service=mock_translation_service)
        helper = _PendingTranslation(1, coordinator)
        del coordinator
        gc.collect()

        helper.on_translation_result(TranslationResult(text="Hi"))
        helper.on_translation_error("boom")
