from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from bookshelf.core.errors import ListFailed, StoreFailed
from bookshelf.infra.ports.storage import ObjectStorePort

logger = logging.getLogger(__name__)


class LocalFileStorage(ObjectStorePort):
    """Filesystem object store for development; keys map to relative paths."""

    def __init__(self, base_dir: Path, *, max_keys: int = 0):
        self.base_dir = base_dir
        self.max_keys = max_keys
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        root = self.base_dir.resolve()
        dest = (root / key.lstrip("/")).resolve()
        if root not in dest.parents:
            raise StoreFailed()
        return dest

    def put_object(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> str:
        dest = self._path(key)
        digest = hashlib.md5()
        tmp_name: str | None = None
        stored = False
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target and rename so readers never see a partial file.
            with tempfile.NamedTemporaryFile(dir=dest.parent, prefix=".upload-", delete=False) as tmp:
                tmp_name = tmp.name
                for chunk in iter(lambda: stream.read(64 * 1024), b""):
                    digest.update(chunk)
                    tmp.write(chunk)
            os.replace(tmp_name, dest)
            stored = True
        except (OSError, ValueError) as exc:
            logger.warning("Local write failed for %s: %s", key, exc)
            raise StoreFailed() from exc
        finally:
            if not stored and tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        return f'"{digest.hexdigest()}"'

    def list_keys(self, prefix: str) -> list[str]:
        keys: list[str] = []
        try:
            paths = sorted(p for p in self.base_dir.rglob("*") if p.is_file())
        except OSError as exc:
            raise ListFailed() from exc

        for path in paths:
            if path.name.startswith(".upload-"):
                continue
            key = path.relative_to(self.base_dir).as_posix()
            if not key.startswith(prefix):
                continue
            keys.append(key)
            if self.max_keys and len(keys) >= self.max_keys:
                break
        return keys

