"""Derive the fixed JSON:API route set for a resource."""

from __future__ import annotations

import enum
import re
from typing import Any, List, Mapping, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from jsonapi_plugin.exceptions import ConfigurationError
from jsonapi_plugin.routing.inflection import noun_forms

DEFAULT_NAMESPACE = "api"

_PLACEHOLDER_RE = re.compile(r":(\w+)")


class HTTPMethod(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


MEMBER_METHODS = (HTTPMethod.GET, HTTPMethod.PATCH, HTTPMethod.DELETE)
RELATIONSHIP_METHODS = (HTTPMethod.GET, HTTPMethod.POST, HTTPMethod.PATCH, HTTPMethod.DELETE)


class RouteSpec(BaseModel):
    """Resource routes to generate.

    ``resource`` is a singular noun (``"post"``). ``relationships`` are used
    verbatim, so pass them in the grammatical number the schema uses.
    """

    model_config = ConfigDict(frozen=True)

    resource: Optional[str] = None
    controller: Optional[str] = None
    relationships: Optional[List[str]] = None


class Route(NamedTuple):
    """One planned route: ``GET /api/posts/:post_id -> api-posts#get_post``."""

    method: HTTPMethod
    path: str
    action: str
    controller: str

    @property
    def path_template(self) -> str:
        """Path with ``{name}`` placeholders, as FastAPI expects."""
        return _PLACEHOLDER_RE.sub(r"{\1}", self.path)

    @property
    def name(self) -> str:
        return f"{self.controller}#{self.action}"


def base_path(plural: str, namespace: str | None = DEFAULT_NAMESPACE) -> str:
    """Return ``/{namespace}/{plural}``, or ``/{plural}`` without a namespace."""
    prefix = (namespace or "").strip("/")
    return f"/{prefix}/{plural}" if prefix else f"/{plural}"


def plan(
    spec: RouteSpec | Mapping[str, Any], namespace: str | None = DEFAULT_NAMESPACE
) -> tuple[Route, ...]:
    """Return the routes for a resource, in registration order.

    ``plan({"resource": "post", "relationships": ["author"]})`` gives::

        GET    /api/posts                              fetch_posts
        POST   /api/posts                              post_post
        GET    /api/posts/:post_id                     get_post
        PATCH  /api/posts/:post_id                     patch_post
        DELETE /api/posts/:post_id                     delete_post
        GET    /api/posts/:post_id/relationships/author get_related_author
        POST   ...                                     post_related_author
        PATCH  ...                                     patch_related_author
        DELETE ...                                     delete_related_author
    """
    if not isinstance(spec, RouteSpec):
        try:
            spec = RouteSpec.model_validate(dict(spec))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid route spec {spec!r}: {exc}") from exc
    if not spec.resource:
        raise ConfigurationError("resource is a required param")

    singular, plural = noun_forms(spec.resource)
    base = base_path(plural, namespace)
    controller = spec.controller or f"api-{plural}"
    member = f"{base}/:{singular}_id"

    routes = [
        Route(HTTPMethod.GET, base, f"fetch_{plural}", controller),
        Route(HTTPMethod.POST, base, f"post_{singular}", controller),
    ]
    for method in MEMBER_METHODS:
        routes.append(Route(method, member, f"{method.value.lower()}_{singular}", controller))

    for relationship in spec.relationships or []:
        path = f"{member}/relationships/{relationship}"
        for method in RELATIONSHIP_METHODS:
            routes.append(
                Route(method, path, f"{method.value.lower()}_related_{relationship}", controller)
            )
    return tuple(routes)
