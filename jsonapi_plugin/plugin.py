"""Plugin facade bundling routes, document helpers and error rendering."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fastapi import FastAPI, Request

from jsonapi_plugin.config import JSONAPISettings
from jsonapi_plugin.core.document import JSONAPIDocumentBuilder
from jsonapi_plugin.core.errors import render_error
from jsonapi_plugin.middleware.error_handler import ErrorHandlerMiddleware
from jsonapi_plugin.responses import JSONAPIResponse
from jsonapi_plugin.routers.base import JSONAPIRouter
from jsonapi_plugin.routing.planner import Route, RouteSpec
from jsonapi_plugin.utils.query_params import parse_query_params

logger = logging.getLogger(__name__)


class JSONAPI:
    """Helpers for building a JSON:API compliant FastAPI application.

    Typical startup::

        jsonapi = JSONAPI(namespace="api")
        jsonapi.resource_routes(
            {"resource": "post", "relationships": ["author", "comments"]},
            PostsController(jsonapi),
        )
        jsonapi.install(app)

    Routes are copied onto the app by :meth:`install`, so declare every
    resource before installing.
    """

    document_builder_class: type[JSONAPIDocumentBuilder] = JSONAPIDocumentBuilder

    def __init__(self, settings: JSONAPISettings | None = None, **options: Any) -> None:
        self.settings = settings or JSONAPISettings(**options)
        self.router = JSONAPIRouter(namespace=self.settings.namespace)
        self.documents = self.document_builder_class()

    def install(self, app: FastAPI) -> None:
        """Mount the resource routes and the error middleware on ``app``."""
        app.include_router(self.router)
        app.add_middleware(ErrorHandlerMiddleware, debug=self.settings.debug)
        logger.debug(
            "Installed %d JSON:API routes under namespace %r",
            len(self.router.routes),
            self.settings.namespace,
        )

    def resource_routes(
        self, spec: RouteSpec | Mapping[str, Any], controller: Any | None = None
    ) -> tuple[Route, ...]:
        """Register the standard routes for a resource."""
        return self.router.resource_routes(spec, controller)

    def register_controller(self, name: str, controller: Any) -> None:
        self.router.register_controller(name, controller)

    def resource_document(self, record: Any, **options: Any) -> dict[str, Any]:
        return self.documents.resource_document(record, **options)

    def compound_resource_document(self, record: Any, **options: Any) -> dict[str, Any]:
        return self.documents.compound_resource_document(record, **options)

    def resource_documents(self, records: Iterable[Any], **options: Any) -> dict[str, Any]:
        return self.documents.resource_documents(records, **options)

    def render_error(
        self,
        status: int | None = None,
        errors: Any = None,
        data: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> JSONAPIResponse:
        """Render an error envelope; see :func:`jsonapi_plugin.core.errors.render_error`."""
        return render_error(status, errors, data, meta)

    def document_options(self, request: Request) -> dict[str, Any]:
        """Return ``include``/``fields`` formatter options from the query string."""
        return parse_query_params(request.query_params)
