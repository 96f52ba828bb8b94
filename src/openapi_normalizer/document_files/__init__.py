"""Document file exports."""

from .document_io import DocumentError, read_document, write_document

__all__ = ["DocumentError", "read_document", "write_document"]
