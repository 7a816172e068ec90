"""JSON:API error objects and error envelopes."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_plugin.responses import JSONAPIResponse

DEFAULT_ERROR_STATUS = 500
DEFAULT_ERROR_TITLE = "Error processing request"


def build_error_envelope(
    status: int | None = None,
    errors: Any = None,
    data: Mapping[str, Any] | None = None,
    meta: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the body of an error response.

    ``errors`` is passed through as-is when it is a list or tuple, otherwise
    a single generic error object is synthesized from ``status``. ``data``
    is merged into the top level, so a document from ``resource_document``
    contributes its ``data`` key. ``meta`` lands under ``meta``.
    """
    if not isinstance(errors, (list, tuple)):
        errors = [
            {
                "status": status or DEFAULT_ERROR_STATUS,
                "title": DEFAULT_ERROR_TITLE,
            }
        ]
    envelope: dict[str, Any] = {}
    if data:
        envelope.update(data)
    if meta:
        envelope["meta"] = meta
    envelope["errors"] = list(errors)
    return envelope


def render_error(
    status: int | None = None,
    errors: Any = None,
    data: Mapping[str, Any] | None = None,
    meta: Mapping[str, Any] | None = None,
) -> JSONAPIResponse:
    """Return a JSON:API error response with ``status`` (default 500)."""
    return JSONAPIResponse(
        build_error_envelope(status, errors, data, meta),
        status_code=status or DEFAULT_ERROR_STATUS,
    )


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | int | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(
        self,
        errors: list[dict[str, Any]],
        *,
        data: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return build_error_envelope(errors=errors, data=data, meta=meta)
