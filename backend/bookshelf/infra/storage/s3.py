from __future__ import annotations

import logging
from typing import Any, BinaryIO

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from bookshelf.core.errors import ListFailed, StoreFailed
from bookshelf.infra.ports.storage import ObjectStorePort

logger = logging.getLogger(__name__)


class S3ObjectStore(ObjectStorePort):
    """Object store backed by a single S3 bucket."""

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        *,
        max_keys: int = 0,
        connect_timeout: int = 5,
        read_timeout: int = 60,
        client: Any | None = None,
    ):
        self.bucket = bucket
        self.region = region
        self.max_keys = max_keys
        if client is None:
            session = boto3.session.Session(region_name=region) if region else boto3.session.Session()
            # Single attempt; a stalled call fails once a timeout elapses.
            config = Config(
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                retries={"total_max_attempts": 1},
            )
            client = session.client("s3", config=config)
        self.client = client

    def put_object(self, key: str, stream: BinaryIO, content_type: str, acl: str) -> str:
        try:
            response = self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=stream,
                ACL=acl,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError, OSError) as exc:
            logger.warning("S3 put_object failed for s3://%s/%s: %s", self.bucket, key, exc)
            raise StoreFailed() from exc
        return response.get("ETag", "")

    def list_keys(self, prefix: str) -> list[str]:
        keys: list[str] = []
        try:
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                for item in page.get("Contents", []):
                    keys.append(item["Key"])
                    if self.max_keys and len(keys) >= self.max_keys:
                        logger.info("Listing of %s truncated at %d keys", prefix, self.max_keys)
                        return keys
        except (BotoCoreError, ClientError) as exc:
            logger.warning("S3 list_objects_v2 failed for s3://%s/%s: %s", self.bucket, prefix, exc)
            raise ListFailed() from exc
        return keys
