from __future__ import annotations

from fastapi import HTTPException, UploadFile, status

from app.core.config import settings
from app.parsing.errors import FileReadError, UnsupportedFileTypeError
from app.parsing.models import ParsedDoc
from app.parsing.parse import READ_ERROR_MESSAGE, extract_text_from_upload, resolve_source_type

_CHUNK_SIZE = 1024 * 64


async def read_upload(file: UploadFile) -> bytes:
    limit = settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        try:
            chunk = await file.read(_CHUNK_SIZE)
        except OSError as exc:
            raise FileReadError(READ_ERROR_MESSAGE) from exc
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum allowed size is {limit // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


async def parse_upload(file: UploadFile) -> ParsedDoc:
    """Validate and decode an uploaded resume, mapping failures to HTTP 400."""
    filename = file.filename or "uploaded-file"
    try:
        # Reject by type before reading the body.
        resolve_source_type(filename, file.content_type)
        content = await read_upload(file)
        return extract_text_from_upload(filename=filename, content_type=file.content_type, content=content)
    except (UnsupportedFileTypeError, FileReadError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
