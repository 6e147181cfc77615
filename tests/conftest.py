"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def clear_config_cache(tmp_path, monkeypatch):
    """Point config at an empty dir and clear the cache before and after test."""
    from lib.config import clear_cache

    monkeypatch.setenv("SNIPPETS_CONFIG_DIR", str(tmp_path / "config"))
    clear_cache()
    yield tmp_path / "config"
    clear_cache()


@pytest.fixture
def sample_jsonc():
    """Return a user snippets file with comments and a tab in a body."""
    return """{
\t// Place your snippets for javascript here.
\t/* Each snippet is defined under a snippet name
\t   and has a prefix, body and description. */
\t"Print to console": {
\t\t"prefix": "log",
\t\t"body": [
\t\t\t"console.log('$1'); // not a comment",
\t\t\t"\tindented /* still not a comment */"
\t\t],
\t\t"description": "Log output to console"
\t}
}
"""


@pytest.fixture
def settings_root(tmp_path):
    """Return a locator rooted in tmp_path."""
    from core.types import PlatformFamily
    from lib.paths import PlatformLocator

    return PlatformLocator(PlatformFamily.LINUX, override=str(tmp_path / "User"))
