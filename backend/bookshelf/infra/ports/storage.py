from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class ObjectStorePort(ABC):
    @abstractmethod
    def put_object(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> str:
        """Persist the whole stream at key and return the backend entity tag.

        Raises StoreFailed on any backend error.
        """

    @abstractmethod
    def list_keys(self, prefix: str) -> list[str]:
        """Return every key starting with prefix, in backend order.

        Raises ListFailed on any backend error.
        """
