"""FastAPI helpers for building JSON:API compliant applications."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder, build_error_envelope, render_error
from .exceptions import (
    ConfigurationError,
    InvalidRecordError,
    JSONAPIPluginError,
    UnresolvedInflectionError,
)
from .plugin import JSONAPI
from .records import Record, ResourceRecord
from .routers.base import JSONAPIRouter
from .routing.planner import HTTPMethod, Route, RouteSpec, plan
from .serializers.base import ALL_RELATIONSHIPS, JSONAPISerializer

__all__ = [
    "ALL_RELATIONSHIPS",
    "ConfigurationError",
    "HTTPMethod",
    "InvalidRecordError",
    "JSONAPI",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIPluginError",
    "JSONAPIRouter",
    "JSONAPISerializer",
    "Record",
    "ResourceRecord",
    "Route",
    "RouteSpec",
    "UnresolvedInflectionError",
    "build_error_envelope",
    "plan",
    "render_error",
]
