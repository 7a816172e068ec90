"""Utilities for JSON:API request handling."""

from .query_params import parse_query_params

__all__ = ["parse_query_params"]
