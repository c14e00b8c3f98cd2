from __future__ import annotations

from functools import lru_cache

from bookshelf.application.services import GatewayService
from bookshelf.core.config import get_settings
from bookshelf.domain.urls import URLPolicy
from bookshelf.infra.ports.storage import ObjectStorePort
from bookshelf.infra.ports.uploader import UploaderPort
from bookshelf.infra.storage.local import LocalFileStorage
from bookshelf.infra.storage.memory import InMemoryObjectStore
from bookshelf.infra.storage.uploader import ObjectStoreUploader

LOCAL_MOUNT_PATH = "/uploads"


@lru_cache(maxsize=1)
def get_object_store() -> ObjectStorePort:
    settings = get_settings()
    if settings.storage_backend == "local":
        return LocalFileStorage(base_dir=settings.upload_dir, max_keys=settings.list_max_keys)
    if settings.storage_backend == "memory":
        return InMemoryObjectStore(max_keys=settings.list_max_keys)
    if settings.storage_backend != "s3":
        raise RuntimeError(f"Unknown BOOKSHELF_STORAGE_BACKEND: {settings.storage_backend!r}")

    from bookshelf.infra.storage.s3 import S3ObjectStore

    return S3ObjectStore(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        max_keys=settings.list_max_keys,
        connect_timeout=settings.s3_connect_timeout_seconds,
        read_timeout=settings.s3_read_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_uploader() -> UploaderPort:
    return ObjectStoreUploader(get_object_store())


@lru_cache(maxsize=1)
def get_url_policy() -> URLPolicy:
    settings = get_settings()
    if settings.public_base_url:
        return URLPolicy(root_url=settings.public_base_url)
    if settings.storage_backend == "local":
        return URLPolicy(root_url=f"{LOCAL_MOUNT_PATH}/")
    return URLPolicy.for_bucket(settings.s3_bucket, settings.s3_region)


def get_gateway_service() -> GatewayService:
    settings = get_settings()
    return GatewayService(
        uploader=get_uploader(),
        objects=get_object_store(),
        urls=get_url_policy(),
        acl=settings.object_acl,
        default_content_type=settings.default_content_type,
    )


def clear_caches() -> None:
    get_settings.cache_clear()
    get_object_store.cache_clear()
    get_uploader.cache_clear()
    get_url_policy.cache_clear()


async def provide_gateway_service() -> GatewayService:
    return get_gateway_service()
