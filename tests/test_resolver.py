import asyncio

from helpers import write_catalog

from translation_sync.models import CoverageStats, TranslationKey
from translation_sync.scanner import CatalogLookup, MissingKeyResolver, StaticLookup


def analyze(lookup, locale, keys):
    return asyncio.run(MissingKeyResolver(lookup, locale).analyze(keys))


def test_missing_keys_keep_input_order():
    lookup = StaticLookup({"es": {"Welcome": "Bienvenido"}})
    missing, stats = analyze(lookup, "es", ["Goodbye", "Welcome", "About", "Goodbye"])

    assert missing == ["Goodbye", "About"]
    assert stats.total_keys == 3
    assert stats.missing_keys == 2
    assert stats.translated_keys == 1


def test_coverage_is_rounded_to_two_decimals():
    lookup = StaticLookup({"es": {"A": "a", "B": "b"}})
    _, stats = analyze(lookup, "es", ["A", "B", "C"])
    assert stats.coverage_percentage == 66.67


def test_no_keys_means_full_coverage():
    _, stats = analyze(StaticLookup(), "es", [])
    assert stats == CoverageStats(
        total_keys=0, missing_keys=0, translated_keys=0, coverage_percentage=100.0
    )


def test_translation_equal_to_key_counts_as_missing():
    lookup = StaticLookup({"de": {"Name": "Name"}})
    assert asyncio.run(MissingKeyResolver(lookup, "de").is_missing("Name"))


def test_empty_translation_counts_as_translated():
    lookup = StaticLookup({"de": {"Name": ""}})
    assert not asyncio.run(MissingKeyResolver(lookup, "de").is_missing("Name"))


def test_accepts_translation_keys():
    keys = [TranslationKey(text="Welcome"), TranslationKey(text="Goodbye")]
    lookup = StaticLookup({"es": {"Welcome": "Bienvenido"}})
    missing = asyncio.run(MissingKeyResolver(lookup, "es").find_missing(keys))
    assert [key.text for key in missing] == ["Goodbye"]


class TestCatalogLookup:
    def test_reads_flat_catalog(self, tmp_path):
        write_catalog(tmp_path / "es.json", {"Welcome": "Bienvenido"})
        lookup = CatalogLookup(tmp_path, "flat")

        assert asyncio.run(lookup.resolve("Welcome", "es")) == "Bienvenido"
        assert asyncio.run(lookup.resolve("Goodbye", "es")) == "Goodbye"

    def test_preferred_format_wins(self, tmp_path):
        write_catalog(tmp_path / "es.json", {"Welcome": "flat", "Only flat": "f"})
        write_catalog(tmp_path / "es" / "messages.json", {"Welcome": "scoped"})
        lookup = CatalogLookup(tmp_path, "scoped")

        async def _go():
            return (
                await lookup.resolve("Welcome", "es"),
                await lookup.resolve("Only flat", "es"),
            )

        assert asyncio.run(_go()) == ("scoped", "f")

    def test_missing_locale_resolves_to_key(self, tmp_path):
        lookup = CatalogLookup(tmp_path)
        assert asyncio.run(lookup.resolve("Welcome", "fr")) == "Welcome"

    def test_cache_is_cleared(self, tmp_path):
        lookup = CatalogLookup(tmp_path)
        assert asyncio.run(lookup.resolve("Welcome", "es")) == "Welcome"

        write_catalog(tmp_path / "es.json", {"Welcome": "Bienvenido"})
        assert asyncio.run(lookup.resolve("Welcome", "es")) == "Welcome"

        lookup.clear()
        assert asyncio.run(lookup.resolve("Welcome", "es")) == "Bienvenido"
