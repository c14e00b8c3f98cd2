from __future__ import annotations

import hashlib
from typing import BinaryIO

from bookshelf.core.errors import ListFailed, StoreFailed
from bookshelf.infra.ports.storage import ObjectStorePort


class InMemoryObjectStore(ObjectStorePort):
    def __init__(self, *, max_keys: int = 0):
        self.max_keys = max_keys
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}
        self.acls: dict[str, str] = {}
        self.fail_writes = False
        self.fail_lists = False
        self.write_calls = 0
        self.list_calls = 0

    def put_object(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> str:
        self.write_calls += 1
        if self.fail_writes:
            raise StoreFailed()
        data = stream.read()
        self.objects[key] = data
        self.content_types[key] = content_type
        self.acls[key] = acl
        return f'"{hashlib.md5(data).hexdigest()}"'

    def list_keys(self, prefix: str) -> list[str]:
        self.list_calls += 1
        if self.fail_lists:
            raise ListFailed()
        keys = [key for key in self.objects if key.startswith(prefix)]
        if self.max_keys:
            keys = keys[: self.max_keys]
        return keys
