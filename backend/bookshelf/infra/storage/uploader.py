from __future__ import annotations

import logging
from typing import BinaryIO

from bookshelf.domain.models import UploadAck
from bookshelf.infra.ports.storage import ObjectStorePort
from bookshelf.infra.ports.uploader import UploaderPort

logger = logging.getLogger(__name__)


class ObjectStoreUploader(UploaderPort):
    """Narrow an object store down to its write path."""

    def __init__(self, store: ObjectStorePort):
        self.store_backend = store

    def store(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> UploadAck:
        etag = self.store_backend.put_object(key, stream, content_type, acl)
        logger.info("Stored object %s (etag=%s)", key, etag)
        return UploadAck(etag=etag, key=key)
