from pydantic import BaseModel


class UploadResponse(BaseModel):
    pdf_url: str
    pdf_name: str


class ErrorResponse(BaseModel):
    error: str
