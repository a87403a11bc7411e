"""Unit tests for settings validation."""

import pytest
from pydantic import ValidationError

from euclid_mam.config import Settings, get_settings


class TestSettings:
    def test_test_environment_loaded(self):
        settings = get_settings()

        assert settings.site_url == "http://test"
        assert settings.database_url.startswith("sqlite+aiosqlite:///")

    def test_site_url_trailing_slash_removed(self):
        assert Settings(site_url="https://example.org/blog/").site_url == "https://example.org/blog"

    def test_environment_normalised(self):
        assert Settings(environment="Production").environment == "production"

    @pytest.mark.parametrize("field,value", [("environment", "staging"), ("avatar_size", 0)])
    def test_rejected_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})
