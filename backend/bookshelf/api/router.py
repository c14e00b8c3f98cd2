from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as ReceivedFile

from bookshelf.api.dependencies import provide_gateway_service
from bookshelf.api.schemas.library import BookItem, LibraryResponse
from bookshelf.api.schemas.upload import ErrorResponse, UploadResponse
from bookshelf.application.services import GatewayService
from bookshelf.domain.models import UploadRequest

router = APIRouter(tags=["library"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/upload", response_model=UploadResponse, responses=_ERROR_RESPONSES)
async def upload_pdf(
    pdf: UploadFile | str | None = File(default=None),
    s3_path: str | None = Form(default=None),
    service: GatewayService = Depends(provide_gateway_service),
):
    # A part sent without a filename arrives as plain text, not a file.
    if not isinstance(pdf, ReceivedFile):
        pdf = None
    request = UploadRequest(
        stream=pdf.file if pdf is not None else None,
        filename=pdf.filename if pdf is not None else None,
        folder=s3_path,
        content_type=pdf.content_type if pdf is not None else None,
    )
    data = await run_in_threadpool(service.ingest, request)
    return UploadResponse(**data)


@router.get("/library", response_model=LibraryResponse, responses=_ERROR_RESPONSES)
async def show_library(
    userId: str | None = Query(default=None),
    service: GatewayService = Depends(provide_gateway_service),
):
    entries = await run_in_threadpool(service.list_library, userId)
    return LibraryResponse(
        books=[BookItem(url=item.url, thumbnail=item.thumbnail, name=item.name) for item in entries]
    )
