"""
Configuration Validators
========================

Startup checks for ``inkpost.config``. Issues are strings prefixed with
their severity (CRITICAL, WARNING, INFO); CRITICAL ones stop a production
process from booting.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
}


def _severity(issue: str) -> str:
    return issue.split(":", 1)[0].strip().upper()


def validate_config_on_startup(app_config=None):
    """
    Log every configuration issue at its own level.

    Raises:
        ImproperlyConfigured: production config with CRITICAL issues.
    """
    if app_config is None:
        from inkpost.config import config as app_config

    issues = app_config.validate()
    for issue in issues:
        logger.log(SEVERITY_LEVELS.get(_severity(issue), logging.WARNING), issue)

    critical = [issue for issue in issues if _severity(issue) == "CRITICAL"]
    if critical and app_config.is_production:
        raise ImproperlyConfigured(
            "Refusing to start with invalid production configuration:\n"
            + "\n".join(f"  - {issue}" for issue in critical)
        )

    app_config.log_status()
