"""Core JSON:API document and error helpers."""

from .document import JSONAPIDocumentBuilder, normalize_fields, parse_include
from .errors import JSONAPIErrorBuilder, build_error_envelope, render_error

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "build_error_envelope",
    "normalize_fields",
    "parse_include",
    "render_error",
]
