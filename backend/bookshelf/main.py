from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from bookshelf.api.dependencies import LOCAL_MOUNT_PATH
from bookshelf.api.exception_handlers import gateway_error_handler
from bookshelf.api.router import router
from bookshelf.core.config import get_settings
from bookshelf.core.errors import GatewayError
from bookshelf.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(GatewayError, gateway_error_handler)
app.include_router(router)

if settings.storage_backend == "local":
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(LOCAL_MOUNT_PATH, StaticFiles(directory=str(settings.upload_dir)), name="uploads")


@app.get("/healthz", tags=["health"])
def healthz() -> dict[str, str]:
    return {"ok": "true"}
