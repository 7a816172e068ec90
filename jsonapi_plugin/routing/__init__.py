"""Route planning for JSON:API resources."""

from .inflection import noun_forms, pluralize, singularize
from .planner import DEFAULT_NAMESPACE, HTTPMethod, Route, RouteSpec, base_path, plan

__all__ = [
    "DEFAULT_NAMESPACE",
    "HTTPMethod",
    "Route",
    "RouteSpec",
    "base_path",
    "noun_forms",
    "plan",
    "pluralize",
    "singularize",
]
