"""
Base Service
=============

Foundation for service classes. Provides a per-module logger and an
injectable clock so time-dependent services stay testable.
"""

import logging
from django.utils import timezone


class BaseService:
    """
    Service classes inherit from this.

    Subclass example::

        class SitemapService(BaseService):
            def read_or_generate(self, kind):
                self.logger.info("...")

    Features:
        - ``cls.logger``: logger named after the subclass module
        - ``self.now()``: current aware datetime, overridable via ``clock``
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    def __init__(self, clock=None):
        self._clock = clock or timezone.now

    def now(self):
        return self._clock()
