"""
Core app: shared exceptions, repositories and service base classes.

``ready()`` checks the environment-derived Inkpost config before the first
request; production refuses to start on CRITICAL issues.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Inkpost core"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        from inkpost.config import get_config
        from core.config import validate_config_on_startup

        validate_config_on_startup(get_config())
