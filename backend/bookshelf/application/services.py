from __future__ import annotations

import logging
from typing import BinaryIO

from bookshelf.core.errors import GatewayError, ListFailed, MissingFile, StoreFailed, StreamOpenFailed
from bookshelf.domain.keys import build_key, build_list_prefix
from bookshelf.domain.models import LibraryEntry, UploadRequest
from bookshelf.domain.urls import URLPolicy
from bookshelf.infra.ports.storage import ObjectStorePort
from bookshelf.infra.ports.uploader import UploaderPort

logger = logging.getLogger(__name__)


def _open_stream(stream: BinaryIO) -> None:
    try:
        if stream.seekable():
            stream.seek(0)
    except (OSError, ValueError) as exc:
        raise StreamOpenFailed() from exc


class GatewayService:
    def __init__(
        self,
        *,
        uploader: UploaderPort,
        objects: ObjectStorePort,
        urls: URLPolicy,
        acl: str = "public-read",
        default_content_type: str = "application/pdf",
    ):
        self.uploader = uploader
        self.objects = objects
        self.urls = urls
        self.acl = acl
        self.default_content_type = default_content_type

    def ingest(self, request: UploadRequest) -> dict[str, str]:
        """Store one upload and return its public URL and original name.

        The request stream is closed exactly once, whatever the outcome.
        """
        stream = request.stream
        try:
            if stream is None or not request.filename:
                raise MissingFile()
            key = build_key(request.folder, request.filename)
            _open_stream(stream)
            try:
                ack = self.uploader.store(
                    key,
                    stream,
                    request.content_type or self.default_content_type,
                    self.acl,
                )
            except GatewayError:
                raise
            except Exception as exc:
                logger.exception("Uploader failed for %s", key)
                raise StoreFailed() from exc
        finally:
            if stream is not None:
                stream.close()

        return {"pdf_url": self.urls.object_url(ack.key), "pdf_name": request.filename}

    def list_library(self, owner_id: str | None) -> list[LibraryEntry]:
        prefix = build_list_prefix(owner_id)
        try:
            keys = self.objects.list_keys(prefix)
        except ListFailed:
            raise
        except Exception as exc:
            logger.exception("Listing failed for prefix %s", prefix)
            raise ListFailed() from exc

        entries: list[LibraryEntry] = []
        for key in keys:
            entry = LibraryEntry(
                url=self.urls.object_url(key),
                thumbnail=self.urls.thumbnail_url(key),
                name=key,
            )
            logger.debug("PDF URL: %s", entry.url)
            logger.debug("Thumbnail URL: %s", entry.thumbnail)
            entries.append(entry)
        return entries
