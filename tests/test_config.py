"""Tests for environment-driven configuration."""

import re

import pytest

from vanillatemplates.config import VERSION, Config, get_directive_prefixes, get_template_dir


@pytest.fixture
def reload_config(monkeypatch):
    """Reload Config inside the test, and again after the env is restored."""
    yield Config.reload
    monkeypatch.undo()
    Config.reload()


class TestConfig:
    """Test configuration loading."""

    def test_version_format(self):
        assert re.match(r"^\d+\.\d+\.\d+", VERSION)

    def test_default_prefixes(self, monkeypatch, reload_config):
        monkeypatch.delenv("DIRECTIVE_PREFIXES", raising=False)
        reload_config()
        assert get_directive_prefixes() == ("data-", "")

    def test_prefixes_from_env(self, monkeypatch, reload_config):
        monkeypatch.setenv("DIRECTIVE_PREFIXES", "v-, data-, v-")
        reload_config()
        assert get_directive_prefixes() == ("v-", "data-")

    def test_numbers_from_env(self, monkeypatch, reload_config):
        monkeypatch.setenv("MAX_INCLUDE_DEPTH", "5")
        monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
        reload_config()
        assert Config.MAX_INCLUDE_DEPTH == 5
        assert Config.HTTP_TIMEOUT == 2.5

    def test_invalid_number_falls_back(self, monkeypatch, reload_config):
        monkeypatch.setenv("PARTIAL_CACHE_TTL", "soon")
        reload_config()
        assert Config.PARTIAL_CACHE_TTL == 300

    def test_empty_base_url_is_none(self, monkeypatch, reload_config):
        monkeypatch.setenv("PARTIALS_BASE_URL", "")
        reload_config()
        assert Config.PARTIALS_BASE_URL is None

    def test_template_dir_unset_by_default(self, monkeypatch, reload_config):
        monkeypatch.delenv("TEMPLATE_DIR", raising=False)
        reload_config()
        assert get_template_dir() is None

    def test_template_dir_from_env(self, monkeypatch, reload_config, tmp_path):
        monkeypatch.setenv("TEMPLATE_DIR", str(tmp_path))
        reload_config()
        assert get_template_dir() == tmp_path
