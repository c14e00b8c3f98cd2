from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_BUCKET = "books-uploaded"


def _load_dotenv() -> None:
    if os.getenv("BOOKSHELF_SKIP_DOTENV") == "1":
        return

    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return

    from dotenv import load_dotenv

    load_dotenv(env_path, override=True)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_non_negative_int(value: str | None, default: int = 0) -> int:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        return max(0, int(raw))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    env: str
    app_name: str
    cors_origins: list[str]
    storage_backend: str
    s3_bucket: str
    s3_region: str | None
    public_base_url: str | None
    upload_dir: Path
    object_acl: str
    default_content_type: str
    list_max_keys: int
    s3_connect_timeout_seconds: int
    s3_read_timeout_seconds: int
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()

    env = os.getenv("BOOKSHELF_ENV", "development")
    cors = os.getenv("BOOKSHELF_CORS_ORIGINS", "*")
    storage_backend = os.getenv("BOOKSHELF_STORAGE_BACKEND", "s3").strip().lower() or "s3"
    bucket = os.getenv("BOOKSHELF_S3_BUCKET", DEFAULT_BUCKET).strip() or DEFAULT_BUCKET
    upload_dir = Path(os.getenv("BOOKSHELF_UPLOAD_DIR", "backend/uploads"))
    list_max_keys = _parse_non_negative_int(os.getenv("BOOKSHELF_LIST_MAX_KEYS"), default=0)
    connect_timeout_raw = os.getenv("BOOKSHELF_S3_CONNECT_TIMEOUT_SECONDS")
    read_timeout_raw = os.getenv("BOOKSHELF_S3_READ_TIMEOUT_SECONDS")
    s3_connect_timeout_seconds = _parse_non_negative_int(connect_timeout_raw, default=5) or 5
    s3_read_timeout_seconds = _parse_non_negative_int(read_timeout_raw, default=60) or 60

    return Settings(
        env=env,
        app_name="Bookshelf Gateway",
        cors_origins=_split_csv(cors) or ["*"],
        storage_backend=storage_backend,
        s3_bucket=bucket,
        s3_region=os.getenv("BOOKSHELF_S3_REGION") or None,
        public_base_url=os.getenv("BOOKSHELF_PUBLIC_BASE_URL") or None,
        upload_dir=upload_dir,
        object_acl=os.getenv("BOOKSHELF_OBJECT_ACL", "public-read").strip() or "public-read",
        default_content_type=os.getenv("BOOKSHELF_DEFAULT_CONTENT_TYPE", "application/pdf").strip()
        or "application/pdf",
        list_max_keys=list_max_keys,
        s3_connect_timeout_seconds=s3_connect_timeout_seconds,
        s3_read_timeout_seconds=s3_read_timeout_seconds,
        log_level=os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
