"""Main entry point for the pocket translator."""

import argparse
import logging
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from pocket_translator.coordinators import TranslatorCoordinator
from pocket_translator.core import Language
from pocket_translator.services import CompletionClient, LLMTranslationService, SettingsManager


def build_parser() -> argparse.ArgumentParser:
    tags = [language.value for language in Language]
    parser = argparse.ArgumentParser(
        prog="pocket-translator",
        description="Translate text between English and Russian.",
    )
    parser.add_argument("text", help="Text to translate")
    parser.add_argument("--from", dest="source", choices=tags, default=Language.ENGLISH.value)
    parser.add_argument("--to", dest="target", choices=tags, default=Language.RUSSIAN.value)
    return parser


def main(argv=None):
    """
    Bootstrap the translator following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)

    # 1. Initialize Application
    app = QCoreApplication(sys.argv[:1])
    app.setApplicationName("Pocket Translator")

    # 2. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 3. Initialize Services
    client = CompletionClient(
        endpoint=settings.get_endpoint(),
        timeout=settings.get_timeout_seconds(),
        retry_delay=settings.get_retry_delay_seconds(),
        web_hosted=settings.is_web_hosted(),
    )
    translation_service = LLMTranslationService(client)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslatorCoordinator(
        translation_service=translation_service,
        source_lang=Language.from_tag(args.source),
        target_lang=Language.from_tag(args.target),
    )
    coordinator.set_input_text(args.text)

    # 5. Signal Wiring
    def on_completed(text: str) -> None:
        print(text)
        app.exit(0)

    def on_failed(message: str) -> None:
        print(message, file=sys.stderr)
        app.exit(1)

    coordinator.translation_completed.connect(on_completed)
    coordinator.translation_failed.connect(on_failed)

    # 6. Start once the event loop is running
    QTimer.singleShot(0, coordinator.request_translation)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
