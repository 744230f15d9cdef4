from pathlib import Path

import pytest


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small application tree: Welcome used three times, Goodbye once."""
    views = tmp_path / "resources" / "views"
    views.mkdir(parents=True)
    (views / "home.blade.php").write_text(
        "<h1>{{ __('Welcome') }}</h1>\n"
        "<p>@lang('Welcome')</p>\n",
        encoding="utf-8",
    )
    controllers = tmp_path / "app" / "Http" / "Controllers"
    controllers.mkdir(parents=True)
    (controllers / "HomeController.php").write_text(
        "<?php\n"
        "return view('home', [\n"
        "    'title' => __('Welcome'),\n"
        "    'bye' => trans('Goodbye'),\n"
        "    'dynamic' => __(\"Hello $name\"),\n"
        "]);\n",
        encoding="utf-8",
    )
    return tmp_path
