import asyncio
from pathlib import Path

import pytest

from translation_sync.config import DEFAULT_PATTERNS
from translation_sync.scanner import KeyExtractor, extract, find_occurrences, is_static_key


class TestExtract:
    def test_every_default_call_form(self):
        text = (
            "{{ __('One') }}\n"
            "@lang(\"Two\")\n"
            "trans('Three')\n"
            "Lang::get('Four')\n"
        )
        assert extract(text, DEFAULT_PATTERNS) == {"One", "Two", "Three", "Four"}

    def test_interpolated_keys_are_rejected(self):
        text = (
            "__(\"Hello $name\")\n"
            "__(\"Hello {$user->name}\")\n"
            "__('Plain')\n"
        )
        assert extract(text, DEFAULT_PATTERNS) == {"Plain"}

    def test_placeholders_are_part_of_static_keys(self):
        assert extract("__('Welcome :name')", DEFAULT_PATTERNS) == {"Welcome :name"}

    def test_is_static_key(self):
        assert is_static_key("Save changes")
        assert not is_static_key("")
        assert not is_static_key("{{ count }} items")
        assert not is_static_key("${total}")

    def test_named_key_group_wins(self):
        pattern = r"""t\((?P<quote>['"])(?P<key>.+?)(?P=quote)\)"""
        assert extract("t('Saved')", [pattern]) == {"Saved"}


class TestOccurrences:
    def test_line_and_context(self):
        text = "first\n  <b>{{ __('Welcome') }}</b>\nthird"
        [(key, occurrence)] = find_occurrences(text, DEFAULT_PATTERNS, "home.blade.php")

        assert key == "Welcome"
        assert occurrence.file == "home.blade.php"
        assert occurrence.line == 2
        assert occurrence.context == (
            "    first\n>>> <b>{{ __('Welcome') }}</b>\n    third"
        )

    def test_context_at_first_line(self):
        [(_, occurrence)] = find_occurrences("__('Top')\nnext", DEFAULT_PATTERNS)
        assert occurrence.line == 1
        assert occurrence.context == ">>> __('Top')\n    next"


class TestKeyExtractor:
    def make_extractor(self, **kwargs):
        return KeyExtractor(
            DEFAULT_PATTERNS,
            file_extensions=["php", "blade.php"],
            exclude_dirs=["vendor", "node_modules"],
            **kwargs,
        )

    def test_find_files_filters_extension_and_excluded_dirs(self, tmp_path: Path):
        for relative in [
            "app/Models/User.php",
            "app/vendor/lib/Skip.php",
            "resources/views/home.blade.php",
            "resources/js/app.js",
            "resources/node_modules/x/index.php",
        ]:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")

        files = self.make_extractor().find_files(
            [tmp_path / "app", tmp_path / "resources", tmp_path / "routes"]
        )
        assert [f.relative_to(tmp_path).as_posix() for f in files] == [
            "app/Models/User.php",
            "resources/views/home.blade.php",
        ]

    def test_scan_deduplicates_across_files(self, project: Path):
        keys = asyncio.run(
            self.make_extractor().scan([project / "app", project / "resources"])
        )

        assert set(keys) == {"Welcome", "Goodbye"}
        assert len(keys["Welcome"].occurrences) == 3
        assert len(keys["Welcome"].files) == 2
        assert len(keys["Goodbye"].occurrences) == 1

    def test_unreadable_file_raises_by_default(self, tmp_path: Path):
        app = tmp_path / "app"
        app.mkdir()
        (app / "broken.php").write_bytes(b"\xff\xfe\xfa __('Broken')")

        with pytest.raises(UnicodeDecodeError):
            asyncio.run(self.make_extractor().scan([app]))

    def test_unreadable_file_skipped_when_requested(self, tmp_path: Path):
        app = tmp_path / "app"
        app.mkdir()
        (app / "broken.php").write_bytes(b"\xff\xfe\xfa __('Broken')")
        (app / "fine.php").write_text("__('Fine')", encoding="utf-8")

        keys = asyncio.run(self.make_extractor(skip_unreadable=True).scan([app]))
        assert set(keys) == {"Fine"}
