"""
URL Shortener Service

Thin client for the is.gd ``format=simple`` API, which answers with the
short URL as plain text.
"""

from typing import Optional

import requests
from django.conf import settings

from core.exceptions import ShortenerError, ValidationError
from core.services import BaseService


class UrlShortenerService(BaseService):
    """
    Shorten URLs through is.gd.

    Any transport error, non-2xx status or body that is not an is.gd link
    is reported as ``ShortenerError``.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        result_prefix: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__()
        self.endpoint = endpoint or settings.SHORTENER_ENDPOINT
        self.result_prefix = result_prefix or settings.SHORTENER_RESULT_PREFIX
        self.timeout = timeout or settings.SHORTENER_TIMEOUT
        self.session = session or requests.Session()

    def shorten(self, url: Optional[str]) -> str:
        if not url or not url.strip():
            raise ValidationError("URL is required", field="url")

        try:
            response = self.session.get(
                self.endpoint,
                params={"format": "simple", "url": url.strip()},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            self.logger.error("Shortener timed out after %ss", self.timeout)
            raise ShortenerError(timeout=self.timeout) from exc
        except requests.RequestException as exc:
            self.logger.error("Shortener request failed: %s", exc)
            raise ShortenerError() from exc

        body = response.text
        if not body.strip().startswith(self.result_prefix):
            self.logger.error("Unexpected shortener response: %r", body[:200])
            raise ShortenerError()

        return body
