"""FastAPI router that registers planned JSON:API resource routes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from fastapi import APIRouter

from jsonapi_plugin.exceptions import ConfigurationError
from jsonapi_plugin.responses import JSONAPIResponse
from jsonapi_plugin.routing.planner import DEFAULT_NAMESPACE, Route, RouteSpec, plan

logger = logging.getLogger(__name__)


class JSONAPIRouter(APIRouter):
    """APIRouter that turns a route spec into registered controller actions."""

    def __init__(self, *args: Any, namespace: str = DEFAULT_NAMESPACE, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.namespace = namespace
        self.controllers: dict[str, Any] = {}

    def register_controller(self, name: str, controller: Any) -> None:
        """Make ``controller`` resolvable by its route controller name."""
        self.controllers[name] = controller

    def resource_routes(
        self,
        spec: RouteSpec | Mapping[str, Any],
        controller: Any | None = None,
    ) -> tuple[Route, ...]:
        """Register the resource routes for ``spec`` and return the plan.

        Args:
            spec: Route spec (``resource``, ``controller``, ``relationships``).
            controller: Object whose methods implement the actions. When
                omitted, the controller registered under the planned
                controller name (``api-{plural}`` by default) is used. A
                class is instantiated once.

        Actions are looked up when the routes are registered. Routes whose
        action the controller does not implement are skipped.

        Examples:
            class PostsController:
                async def fetch_posts(self) -> dict:
                    ...

                async def get_post(self, post_id: str) -> dict:
                    ...

            router.resource_routes(
                {"resource": "post", "relationships": ["author"]},
                PostsController(),
            )
        """
        routes = plan(spec, namespace=self.namespace)
        controller_name = routes[0].controller
        target = controller if controller is not None else self.controllers.get(controller_name)
        if target is None:
            raise ConfigurationError(f"No controller registered as {controller_name!r}.")
        if isinstance(target, type):
            target = target()

        for route in routes:
            endpoint = getattr(target, route.action, None)
            if not callable(endpoint):
                logger.warning(
                    "%s does not implement %s, skipping %s %s",
                    controller_name,
                    route.action,
                    route.method.value,
                    route.path,
                )
                continue
            self.add_jsonapi_route(
                route.path_template,
                endpoint,
                methods=[route.method.value],
                name=route.name,
            )
            logger.debug("Registered %s %s -> %s", route.method.value, route.path, route.name)
        return routes

    def add_jsonapi_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str],
        name: str | None = None,
    ) -> None:
        """Add a route with JSON:API defaults (content type, responses)."""
        self.add_api_route(
            path,
            endpoint,
            methods=methods,
            name=name,
            response_class=JSONAPIResponse,
        )
