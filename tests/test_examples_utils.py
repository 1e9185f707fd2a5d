"""Test the example helpers."""

from blasttext.examples.utils import SimpleConsoleLogger, create_localizer_with_fallback
from blasttext.providers.catalog_localizer import CatalogLocalizer
from blasttext.providers.gettext_localizer import GettextLocalizer


class TestSimpleConsoleLogger:

    def test_levels(self, capsys):
        logger = SimpleConsoleLogger()
        logger.info("blast_complete", rule="word", segments=3)
        logger.warn("localization_fallback")
        logger.error("blast_invalid_pattern", pattern="(")

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "INFO: blast_complete rule=word segments=3",
            "WARN: localization_fallback",
            "ERROR: blast_invalid_pattern pattern=(",
        ]


class TestLocalizerFallback:

    def test_catalog_first(self, temp_catalog_file, tmp_path):
        localizer = create_localizer_with_fallback(catalog_path=temp_catalog_file, localedir=tmp_path)
        assert isinstance(localizer, CatalogLocalizer)
        assert localizer.languages == ["de", "en"]

    def test_gettext_when_catalog_missing(self, tmp_path):
        localizer = create_localizer_with_fallback(catalog_path=tmp_path / "missing.yaml",
                                                   localedir=tmp_path)
        assert isinstance(localizer, GettextLocalizer)

    def test_empty_catalog_last(self, tmp_path, capsys):
        localizer = create_localizer_with_fallback(localedir=tmp_path / "nowhere")

        assert isinstance(localizer, CatalogLocalizer)
        assert localizer.localize("key", "de") == "key"
        assert "not found" in capsys.readouterr().out
