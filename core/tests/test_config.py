"""
Tests for the configuration layer and startup validation.

Run with: python -m pytest core/tests/test_config.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from core.config import validate_config_on_startup
from inkpost.config import AppConfig, SecurityConfig, SiteConfig, SitemapConfig


SECURE_KEY = "k" * 64


def make_config(**overrides):
    """AppConfig with sane production-ready sections unless overridden."""
    fields = {
        "environment": "development",
        "debug": False,
        "site": SiteConfig(base_url="https://blog.example.com", name="Inkpost"),
        "sitemaps": SitemapConfig(store="file", max_age=3600),
        "security": SecurityConfig(secret_key=SECURE_KEY),
    }
    fields.update(overrides)
    return AppConfig(**fields)


def issues_with(prefix, config):
    return [issue for issue in config.validate() if issue.startswith(prefix)]


# =============================================================================
# Site config
# =============================================================================

class TestSiteConfig:

    def test_derived_parts(self):
        site = SiteConfig(base_url="https://blog.example.com:8443", name="Inkpost")

        assert site.protocol == "https"
        assert site.domain == "blog.example.com:8443"

    def test_base_url_from_env_drops_trailing_slash(self, monkeypatch):
        monkeypatch.setenv("BASE_URL", "https://blog.example.com/")

        assert SiteConfig().base_url == "https://blog.example.com"


# =============================================================================
# validate()
# =============================================================================

class TestValidate:

    def test_clean_config_has_no_issues(self):
        assert make_config().validate() == []

    def test_unknown_store_is_critical(self):
        config = make_config(sitemaps=SitemapConfig(store="s3", max_age=60))

        assert any("SITEMAP_STORE" in issue for issue in issues_with("CRITICAL", config))

    def test_negative_max_age_is_critical(self):
        config = make_config(sitemaps=SitemapConfig(store="file", max_age=-1))

        assert any("SITEMAP_MAX_AGE" in issue for issue in issues_with("CRITICAL", config))

    def test_zero_max_age_is_informational(self):
        config = make_config(sitemaps=SitemapConfig(store="cache", max_age=0))

        assert issues_with("CRITICAL", config) == []
        assert len(issues_with("INFO", config)) == 1

    def test_production_requires_secure_key(self):
        config = make_config(
            environment="production",
            security=SecurityConfig(secret_key="django-insecure-dev-key"),
        )

        assert any("SECRET_KEY" in issue for issue in issues_with("CRITICAL", config))

    def test_production_requires_https_base_url(self):
        config = make_config(
            environment="production",
            site=SiteConfig(base_url="http://blog.example.com", name="Inkpost"),
        )

        assert any("BASE_URL" in issue for issue in issues_with("CRITICAL", config))

    def test_debug_in_production_is_a_warning(self):
        config = make_config(environment="production", debug=True)

        assert issues_with("CRITICAL", config) == []
        assert len(issues_with("WARNING", config)) == 1

    def test_development_tolerates_insecure_settings(self):
        config = make_config(
            site=SiteConfig(base_url="http://localhost:8000", name="Inkpost"),
            security=SecurityConfig(secret_key="django-insecure-dev-key"),
        )

        assert issues_with("CRITICAL", config) == []


# =============================================================================
# Startup validation
# =============================================================================

class TestValidateConfigOnStartup:

    def test_critical_issue_blocks_production_startup(self):
        config = make_config(
            environment="production",
            security=SecurityConfig(secret_key="short"),
        )

        with pytest.raises(ImproperlyConfigured, match="SECRET_KEY"):
            validate_config_on_startup(config)

    def test_critical_issue_only_logged_outside_production(self, caplog):
        config = make_config(sitemaps=SitemapConfig(store="s3", max_age=60))

        validate_config_on_startup(config)

        assert "SITEMAP_STORE" in caplog.text

    def test_clean_production_config_starts(self):
        validate_config_on_startup(make_config(environment="production"))
