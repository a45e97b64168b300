"""Unit tests for background workers."""

from unittest.mock import MagicMock

from PySide6.QtCore import QSettings

from fast_translator.services import (
    ThemeSaveWorker,
    TranslationError,
    TranslationResult,
    TranslationWorker,
    WriteGate,
)


def make_worker(service):
    return TranslationWorker(
        translation_service=service,
        text="hello",
        source_language="auto",
        target_language="es",
    )


class TestTranslationWorker:

    def test_success_emits_result_then_finished(self):
        service = MagicMock()
        service.translate.return_value = TranslationResult(text="hola", provider="google")
        worker = make_worker(service)

        events = []
        worker.signals.translation_result.connect(lambda result: events.append(("result", result.text)))
        worker.signals.error.connect(lambda error: events.append(("error", error)))
        worker.signals.finished.connect(lambda: events.append(("finished", None)))

        worker.run()

        service.translate.assert_called_once_with(
            text="hello", source_language="auto", target_language="es"
        )
        assert events == [("result", "hola"), ("finished", None)]

    def test_exception_emits_error_then_finished(self):
        service = MagicMock()
        service.translate.side_effect = TranslationError("network down")
        worker = make_worker(service)

        events = []
        worker.signals.translation_result.connect(lambda result: events.append(("result", result)))
        worker.signals.error.connect(lambda error: events.append(("error", error)))
        worker.signals.finished.connect(lambda: events.append(("finished", None)))

        worker.run()

        assert events == [("error", "network down"), ("finished", None)]

    def test_exception_without_message_reports_type(self):
        service = MagicMock()
        service.translate.side_effect = TimeoutError()
        worker = make_worker(service)

        errors = []
        worker.signals.error.connect(errors.append)
        worker.run()

        assert errors == ["TimeoutError"]


class TestThemeSaveWorker:

    def _factory(self, path):
        def factory():
            return QSettings(str(path), QSettings.Format.IniFormat)
        return factory

    def test_writes_value(self, tmp_path):
        factory = self._factory(tmp_path / "prefs.ini")
        gate = WriteGate()

        ThemeSaveWorker(factory, "theme_mode", "light", gate=gate, ticket=gate.issue()).run()

        assert factory().value("theme_mode") == "light"

    def test_superseded_write_is_skipped(self, tmp_path):
        factory = self._factory(tmp_path / "prefs.ini")
        gate = WriteGate()
        older = ThemeSaveWorker(factory, "theme_mode", "light", gate=gate, ticket=gate.issue())
        newer = ThemeSaveWorker(factory, "theme_mode", "dark", gate=gate, ticket=gate.issue())

        newer.run()
        older.run()

        assert factory().value("theme_mode") == "dark"
