from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from bookshelf.core.errors import GatewayError

logger = logging.getLogger(__name__)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.info("%s %s failed: %s", request.method, request.url.path, type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
