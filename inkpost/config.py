"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.

Usage:
    from inkpost.config import config

    # Public site address
    base_url = config.site.base_url

    # Sitemap storage
    if config.sitemaps.store == "cache":
        ...

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional, List
from urllib.parse import urlparse
import logging

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class SiteConfig:
    """Public address of the site, used for absolute URLs in sitemaps and robots."""
    base_url: str = field(
        default_factory=lambda: os.getenv("BASE_URL", "http://localhost:8000").rstrip("/")
    )
    name: str = field(default_factory=lambda: os.getenv("SITE_NAME", "Inkpost"))

    @property
    def protocol(self) -> str:
        return urlparse(self.base_url).scheme or "https"

    @property
    def domain(self) -> str:
        """Host (and port), the shape Django's sitemap framework expects."""
        return urlparse(self.base_url).netloc


@dataclass(frozen=True)
class SitemapConfig:
    """Sitemap store and freshness settings."""
    # "file" writes under `root`, "cache" uses Django's default cache
    store: str = field(default_factory=lambda: os.getenv("SITEMAP_STORE", "file").lower())
    root: Path = field(
        default_factory=lambda: Path(os.getenv("SITEMAP_ROOT", str(BASE_DIR / "public")))
    )
    # Seconds a stored document stays fresh; 0 means "exists is fresh enough"
    max_age: int = field(default_factory=lambda: int(os.getenv("SITEMAP_MAX_AGE", "0")))
    # Cache-store timeout in seconds; None keeps entries until replaced
    cache_timeout: Optional[int] = field(
        default_factory=lambda: _env_optional_int("SITEMAP_CACHE_TIMEOUT")
    )
    serve_stale_on_error: bool = field(
        default_factory=lambda: _env_bool("SITEMAP_SERVE_STALE_ON_ERROR", "false")
    )


@dataclass(frozen=True)
class ShortenerConfig:
    """URL-shortening upstream."""
    endpoint: str = field(
        default_factory=lambda: os.getenv("SHORTENER_ENDPOINT", "https://is.gd/create.php")
    )
    result_prefix: str = field(
        default_factory=lambda: os.getenv("SHORTENER_RESULT_PREFIX", "https://is.gd/")
    )
    timeout: int = field(default_factory=lambda: int(os.getenv("SHORTENER_TIMEOUT", "10")))


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "5432")))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()


@dataclass(frozen=True)
class RedisConfig:
    """Redis cache / Celery broker settings."""
    url: str = field(default_factory=lambda: os.getenv("REDIS_URL", "redis://localhost:6379/0"))
    broker_url: str = field(default_factory=lambda: os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0"))
    result_backend: str = field(default_factory=lambda: os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0"))


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(","))
    csrf_trusted_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CSRF_TRUSTED_ORIGINS",
        "http://localhost:3000"
    ).split(","))
    admin_url: str = field(default_factory=lambda: os.getenv("ADMIN_URL", "admin").strip("/"))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    site: SiteConfig = field(default_factory=SiteConfig)
    sitemaps: SitemapConfig = field(default_factory=SitemapConfig)
    shortener: ShortenerConfig = field(default_factory=ShortenerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.sitemaps.store not in ("file", "cache"):
            issues.append(
                f"CRITICAL: SITEMAP_STORE must be 'file' or 'cache', got '{self.sitemaps.store}'"
            )
        if self.sitemaps.max_age < 0:
            issues.append("CRITICAL: SITEMAP_MAX_AGE cannot be negative")

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.site.protocol != "https":
                issues.append("CRITICAL: BASE_URL must use https in production")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")
            if self.sitemaps.store == "cache" and self.sitemaps.cache_timeout:
                issues.append("INFO: Cached sitemaps expire after SITEMAP_CACHE_TIMEOUT seconds")

        if self.sitemaps.max_age == 0:
            issues.append("INFO: SITEMAP_MAX_AGE=0, stored sitemaps are served until regenerated")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(f"Base URL: {self.site.base_url}")
        logger.info(f"Sitemap store: {self.sitemaps.store} (max age {self.sitemaps.max_age}s)")


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()


# =============================================================================
# Django Settings Helpers
# =============================================================================

def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES["default"].
    """
    if config.database.is_sqlite:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": config.database.name,
        }

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.database.name,
        "HOST": config.database.host,
        "PORT": config.database.port,
        "USER": config.database.user,
        "PASSWORD": config.database.password,
    }
