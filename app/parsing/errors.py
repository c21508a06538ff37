class UnsupportedFileTypeError(ValueError):
    """Raised for uploads that are not PDF, DOCX or plain text."""


class FileReadError(ValueError):
    """Raised when an accepted file cannot be read."""
