"""Unit tests for LanguageCatalogService."""

from unittest.mock import patch

import pytest

from fast_translator.core import Language
from fast_translator.services import (
    FALLBACK_SUPPORTED_LANGUAGES,
    FALLBACK_TARGET_LANGUAGES,
    LanguageCatalogService,
)
from fast_translator.services.language_catalog import DEFAULT_CATALOG_PATH


class TestWellFormedCatalog:

    def test_supported_keeps_resource_order(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        codes = [lang.code for lang in service.get_supported_languages()]
        assert codes == ["auto", "en", "es", "ja"]

    def test_targets_are_supported_minus_auto(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        supported = service.get_supported_languages()
        targets = service.get_target_languages()
        assert targets == [lang for lang in supported if lang.code != "auto"]
        assert [lang.name for lang in targets] == ["English", "Spanish", "Japanese"]

    def test_auto_in_the_middle_is_removed(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text(
            '[{"code": "de", "name": "German"}, {"code": "auto", "name": "Auto"},'
            ' {"code": "fr", "name": "French"}]'
        )
        service = LanguageCatalogService(path)
        assert [lang.code for lang in service.get_target_languages()] == ["de", "fr"]

    def test_bundled_catalog_loads(self):
        service = LanguageCatalogService()
        assert service.catalog_path == DEFAULT_CATALOG_PATH
        supported = service.get_supported_languages()
        assert supported[0] == Language("auto", "Auto Detect")
        assert Language("en", "English") in service.get_target_languages()
        assert Language("auto", "") not in service.get_target_languages()

    def test_returned_lists_are_copies(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        service.get_supported_languages().clear()
        assert len(service.get_supported_languages()) == 4


class TestFallbackCatalog:

    def test_missing_file_uses_fallback(self, tmp_path):
        service = LanguageCatalogService(tmp_path / "missing.json")
        assert service.get_supported_languages() == list(FALLBACK_SUPPORTED_LANGUAGES)
        assert service.get_target_languages() == list(FALLBACK_TARGET_LANGUAGES)

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"code": "en", "name": "English"}',
            '[{"code": "en"}]',
            '[{"code": "en", "name": "English"}, 5]',
        ],
    )
    def test_malformed_file_uses_fallback(self, tmp_path, content):
        path = tmp_path / "lang.json"
        path.write_text(content)
        service = LanguageCatalogService(path)

        supported = service.get_supported_languages()
        targets = service.get_target_languages()

        assert [(lang.code, lang.name) for lang in supported] == [
            ("auto", "Auto Detect (Error)"),
            ("en", "English (Error)"),
        ]
        assert [(lang.code, lang.name) for lang in targets] == [("en", "English (Error)")]

    def test_deeply_nested_json_uses_fallback(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text("[" * 100000 + "]" * 100000)
        service = LanguageCatalogService(path)

        assert service.get_supported_languages() == list(FALLBACK_SUPPORTED_LANGUAGES)
        assert service.get_target_languages() == list(FALLBACK_TARGET_LANGUAGES)

    def test_fallback_counts_as_loaded(self, tmp_path):
        service = LanguageCatalogService(tmp_path / "missing.json")
        service.load_once()
        assert service.loaded


class TestLoadOnce:

    def test_not_loaded_until_requested(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        assert not service.loaded

    def test_fetches_at_most_once(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        with patch.object(service, "_read_catalog", wraps=service._read_catalog) as read:
            service.load_once()
            service.load_once()
            service.get_supported_languages()
            service.get_target_languages()
        assert read.call_count == 1

    def test_failed_load_is_not_retried(self, tmp_path):
        service = LanguageCatalogService(tmp_path / "missing.json")
        with patch.object(service, "_read_catalog", wraps=service._read_catalog) as read:
            service.get_supported_languages()
            service.get_target_languages()
            service.load_once()
        assert read.call_count == 1

    def test_getters_trigger_load(self, catalog_file):
        service = LanguageCatalogService(catalog_file)
        service.get_target_languages()
        assert service.loaded

    def test_empty_array_yields_empty_lists(self, tmp_path):
        path = tmp_path / "lang.json"
        path.write_text("[]")
        service = LanguageCatalogService(path)
        assert service.get_supported_languages() == []
        assert service.get_target_languages() == []
        assert service.loaded


def test_get_language_name(catalog_file):
    service = LanguageCatalogService(catalog_file)
    assert service.get_language_name("es") == "Spanish"
    assert service.get_language_name("xx") == "xx"
