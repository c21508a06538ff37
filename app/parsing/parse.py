from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from .errors import FileReadError, UnsupportedFileTypeError
from .models import ParsedDoc

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_MIME_TYPES: dict[str, str] = {
    "text/plain": "txt",
    "application/pdf": "pdf",
    DOCX_MIME_TYPE: "docx",
}
ALLOWED_EXTENSIONS: dict[str, str] = {
    ".txt": "txt",
    ".pdf": "pdf",
    ".docx": "docx",
}
_GENERIC_MIME_TYPES = {"", "application/octet-stream"}

UNSUPPORTED_TYPE_MESSAGE = "Please upload a PDF, DOCX, or TXT file."
READ_ERROR_MESSAGE = "Error reading file"


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _normalize_content_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def resolve_source_type(filename: str, content_type: str | None = None) -> str:
    """Map an upload to txt/pdf/docx, or raise UnsupportedFileTypeError.

    The declared content type wins; the extension is only consulted when the
    client sent no type or a generic one.
    """
    mime = _normalize_content_type(content_type)
    if mime in ALLOWED_MIME_TYPES:
        return ALLOWED_MIME_TYPES[mime]
    if mime in _GENERIC_MIME_TYPES:
        extension = Path(filename or "").suffix.lower()
        if extension in ALLOWED_EXTENSIONS:
            return ALLOWED_EXTENSIONS[extension]
    raise UnsupportedFileTypeError(UNSUPPORTED_TYPE_MESSAGE)


def placeholder_text(filename: str) -> str:
    return (
        f"This is placeholder text for {filename}. "
        "In a real application, we would extract text from the PDF or DOCX file."
    )


def decode_plain_text(content: bytes) -> str:
    text = content.decode("utf-8", errors="replace")
    if text.startswith("\ufeff"):
        text = text[1:]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def extract_text_from_upload(filename: str, content_type: str | None, content: bytes) -> ParsedDoc:
    """Turn uploaded bytes into resume text.

    Only plain text is actually decoded. PDF and DOCX uploads are accepted but
    not parsed: their text is a placeholder naming the file and the returned
    document is flagged with ``is_placeholder``.
    """
    name = filename or "uploaded-file"
    source_type = resolve_source_type(name, content_type)

    warnings: list[str] = []
    if source_type == "txt":
        text = decode_plain_text(content)
        is_placeholder = False
        if "\ufffd" in text:
            warnings.append("File contained bytes that are not valid UTF-8; they were replaced.")
    else:
        text = placeholder_text(name)
        is_placeholder = True
        warnings.append(f"{source_type.upper()} text extraction is not supported; placeholder text was used.")
        logger.info("upload_placeholder_text source_type=%s size=%s", source_type, len(content))

    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=name),
        filename=name,
        source_type=source_type,
        text=text,
        is_placeholder=is_placeholder,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")

    source_type = resolve_source_type(path.name)
    content = b""
    if source_type == "txt":
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(READ_ERROR_MESSAGE) from exc
    return extract_text_from_upload(path.name, None, content)
