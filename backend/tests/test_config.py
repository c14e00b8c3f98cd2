from pathlib import Path

from bookshelf.api import dependencies
from bookshelf.core.config import get_settings
from bookshelf.domain.urls import URLPolicy
from bookshelf.infra.storage.local import LocalFileStorage
from bookshelf.infra.storage.memory import InMemoryObjectStore


def test_defaults(monkeypatch):
    for name in ("BOOKSHELF_S3_BUCKET", "BOOKSHELF_CORS_ORIGINS", "BOOKSHELF_LIST_MAX_KEYS", "BOOKSHELF_OBJECT_ACL"):
        monkeypatch.delenv(name, raising=False)
    dependencies.clear_caches()
    try:
        settings = get_settings()
        assert settings.s3_bucket == "books-uploaded"
        assert settings.cors_origins == ["*"]
        assert settings.list_max_keys == 0
        assert settings.object_acl == "public-read"
        assert settings.default_content_type == "application/pdf"
    finally:
        dependencies.clear_caches()


def test_malformed_max_keys_falls_back(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LIST_MAX_KEYS", "lots")
    dependencies.clear_caches()
    try:
        assert get_settings().list_max_keys == 0
    finally:
        dependencies.clear_caches()


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_CORS_ORIGINS", "http://a.test, http://b.test,")
    dependencies.clear_caches()
    try:
        assert get_settings().cors_origins == ["http://a.test", "http://b.test"]
    finally:
        dependencies.clear_caches()


def test_memory_backend_selected():
    dependencies.clear_caches()
    try:
        assert isinstance(dependencies.get_object_store(), InMemoryObjectStore)
        assert dependencies.get_url_policy() == URLPolicy.for_bucket("books-uploaded")
    finally:
        dependencies.clear_caches()


def test_local_backend_uses_mounted_urls(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("BOOKSHELF_STORAGE_BACKEND", "local")
    monkeypatch.setenv("BOOKSHELF_UPLOAD_DIR", str(tmp_path))
    dependencies.clear_caches()
    try:
        assert isinstance(dependencies.get_object_store(), LocalFileStorage)
        assert dependencies.get_url_policy().object_url("users/1/a.pdf") == "/uploads/users/1/a.pdf"
    finally:
        dependencies.clear_caches()


def test_public_base_url_override(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_PUBLIC_BASE_URL", "https://cdn.example")
    dependencies.clear_caches()
    try:
        urls = dependencies.get_url_policy()
        assert urls.thumbnail_url("users/1/a.pdf") == "https://cdn.example/thumbnails/users/1/a.pdf.jpg"
    finally:
        dependencies.clear_caches()


def test_s3_timeouts(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_S3_CONNECT_TIMEOUT_SECONDS", "0")
    monkeypatch.setenv("BOOKSHELF_S3_READ_TIMEOUT_SECONDS", "30")
    dependencies.clear_caches()
    try:
        settings = get_settings()
        assert settings.s3_connect_timeout_seconds == 5
        assert settings.s3_read_timeout_seconds == 30
    finally:
        dependencies.clear_caches()
