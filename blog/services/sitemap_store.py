"""
Sitemap Store
=============

Durable storage for generated sitemap documents, keyed by kind, plus the
freshness policies that decide whether a stored document may be served.

Two backends:
    FileSitemapStore   files under a directory, laid out like the public URLs
    CacheSitemapStore  any Django cache backend (Redis in production)

Both expose ``get(kind)``, ``put(document)`` and ``delete(kind)``.
"""

import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone as dt_timezone
from pathlib import Path
from typing import Optional, Union

from core.exceptions import SitemapStoreError
from .sitemap_types import SitemapDocument, SitemapKind

logger = logging.getLogger(__name__)


# =============================================================================
# Stores
# =============================================================================

class SitemapStore:
    """Interface shared by the store backends."""

    def get(self, kind: SitemapKind) -> Optional[SitemapDocument]:
        raise NotImplementedError

    def put(self, document: SitemapDocument) -> None:
        raise NotImplementedError

    def delete(self, kind: SitemapKind) -> None:
        raise NotImplementedError


class FileSitemapStore(SitemapStore):
    """
    Store documents as UTF-8 files under ``root``.

    ``generated_at`` is read back from the file's modification time, which
    ``put`` sets to the document's own timestamp.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def path_for(self, kind: SitemapKind) -> Path:
        return self.root / kind.storage_name

    def get(self, kind):
        path = self.path_for(kind)
        try:
            xml = path.read_text(encoding="utf-8")
            mtime = path.stat().st_mtime
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise SitemapStoreError(f"{path} is not valid UTF-8: {exc}", kind=kind) from exc
        except OSError as exc:
            raise SitemapStoreError(f"Failed to read {path}: {exc}", kind=kind) from exc

        return SitemapDocument(
            kind=kind,
            xml=xml,
            generated_at=datetime.fromtimestamp(mtime, tz=dt_timezone.utc),
        )

    def put(self, document):
        path = self.path_for(document.kind)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target then swap, so readers never see half a file
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(document.xml)
                stamp = document.generated_at.timestamp()
                os.utime(tmp_name, (stamp, stamp))
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise SitemapStoreError(f"Failed to write {path}: {exc}", kind=document.kind) from exc

        logger.debug("Wrote %s sitemap to %s", document.kind, path)

    def delete(self, kind):
        path = self.path_for(kind)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise SitemapStoreError(f"Failed to delete {path}: {exc}", kind=kind) from exc


class CacheSitemapStore(SitemapStore):
    """
    Store documents in a Django cache.

    ``timeout=None`` keeps entries until they are replaced or deleted.
    """

    def __init__(self, cache, prefix: str = "sitemap", timeout: Optional[int] = None):
        self.cache = cache
        self.prefix = prefix
        self.timeout = timeout

    def key_for(self, kind: SitemapKind) -> str:
        return f"{self.prefix}:{kind.value}"

    def get(self, kind):
        try:
            payload = self.cache.get(self.key_for(kind))
        except Exception as exc:
            raise SitemapStoreError(f"Cache read failed: {exc}", kind=kind) from exc

        if not payload:
            return None

        try:
            return SitemapDocument(
                kind=kind,
                xml=payload["xml"],
                generated_at=datetime.fromisoformat(payload["generated_at"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SitemapStoreError(f"Malformed cache entry: {exc!r}", kind=kind) from exc

    def put(self, document):
        payload = {
            "xml": document.xml,
            "generated_at": document.generated_at.isoformat(),
        }
        try:
            self.cache.set(self.key_for(document.kind), payload, self.timeout)
        except Exception as exc:
            raise SitemapStoreError(f"Cache write failed: {exc}", kind=document.kind) from exc

    def delete(self, kind):
        try:
            self.cache.delete(self.key_for(kind))
        except Exception as exc:
            raise SitemapStoreError(f"Cache delete failed: {exc}", kind=kind) from exc


# =============================================================================
# Freshness policies: (document, now) -> bool
# =============================================================================

def exists_is_fresh(document: SitemapDocument, now: datetime) -> bool:
    """A stored document is served until something regenerates it."""
    return True


class MaxAgeFreshness:
    """Fresh while the document is younger than ``max_age``."""

    def __init__(self, max_age: Union[int, float, timedelta]):
        if not isinstance(max_age, timedelta):
            max_age = timedelta(seconds=max_age)
        self.max_age = max_age

    def __call__(self, document: SitemapDocument, now: datetime) -> bool:
        return now - document.generated_at < self.max_age

    def __repr__(self):
        return f"MaxAgeFreshness({self.max_age!r})"


def freshness_from_max_age(max_age: Optional[int]):
    """Map the SITEMAP_MAX_AGE setting to a policy (0/None: exists is fresh)."""
    if not max_age:
        return exists_is_fresh
    return MaxAgeFreshness(max_age)
