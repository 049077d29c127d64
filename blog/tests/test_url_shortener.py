"""
Tests for the is.gd shortener client and its API endpoint.

Run with: python -m pytest blog/tests/test_url_shortener.py -v
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from core.exceptions import ShortenerError, ValidationError
from blog.services.url_shortener import UrlShortenerService


def fake_session(text="https://is.gd/abc123", status_code=200, error=None):
    session = MagicMock()
    if error:
        session.get.side_effect = error
        return session

    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    session.get.return_value = response
    return session


# =============================================================================
# Service
# =============================================================================

class TestUrlShortenerService:

    def test_returns_short_url(self):
        session = fake_session()
        service = UrlShortenerService(session=session)

        assert service.shorten("https://blog.example.com/posts/hello/") == "https://is.gd/abc123"
        session.get.assert_called_once_with(
            "https://is.gd/create.php",
            params={"format": "simple", "url": "https://blog.example.com/posts/hello/"},
            timeout=10,
        )

    def test_body_is_relayed_verbatim(self):
        service = UrlShortenerService(session=fake_session(text="https://is.gd/abc123\n"))

        assert service.shorten("https://example.com") == "https://is.gd/abc123\n"

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_blank_url_is_rejected_without_calling_upstream(self, url):
        session = fake_session()

        with pytest.raises(ValidationError) as excinfo:
            UrlShortenerService(session=session).shorten(url)

        assert excinfo.value.message == "URL is required"
        session.get.assert_not_called()

    def test_error_body_raises(self):
        service = UrlShortenerService(session=fake_session(text="Error: Please enter a valid URL"))

        with pytest.raises(ShortenerError):
            service.shorten("not a url")

    def test_http_error_raises(self):
        service = UrlShortenerService(session=fake_session(status_code=502))

        with pytest.raises(ShortenerError):
            service.shorten("https://example.com")

    def test_timeout_raises(self):
        service = UrlShortenerService(session=fake_session(error=requests.Timeout()))

        with pytest.raises(ShortenerError) as excinfo:
            service.shorten("https://example.com")

        assert excinfo.value.details["timeout"] == 10

    def test_connection_error_raises(self):
        service = UrlShortenerService(session=fake_session(error=requests.ConnectionError()))

        with pytest.raises(ShortenerError):
            service.shorten("https://example.com")


# =============================================================================
# API endpoint
# =============================================================================

@pytest.mark.django_db
class TestShortenUrlEndpoint:

    ENDPOINT = "/api/v1/shorten-url/"

    def test_success_is_plain_text(self, client):
        with patch("blog.services.url_shortener.requests.Session", return_value=fake_session()):
            response = client.get(self.ENDPOINT, {"url": "https://blog.example.com/posts/x/"})

        assert response.status_code == 200
        assert response.content == b"https://is.gd/abc123"
        assert response["Content-Type"].startswith("text/plain")

    def test_missing_url_is_400(self, client):
        response = client.get(self.ENDPOINT)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"] == "URL is required"

    def test_upstream_failure_is_500(self, client):
        session = fake_session(error=requests.ConnectionError())
        with patch("blog.services.url_shortener.requests.Session", return_value=session):
            response = client.get(self.ENDPOINT, {"url": "https://example.com"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "shortener_error",
            "message": "Failed to shorten URL",
            "detail": {"service": "is.gd"},
        }
