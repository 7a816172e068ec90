"""Routers for JSON:API resources."""

from .base import JSONAPIRouter

__all__ = ["JSONAPIRouter"]
