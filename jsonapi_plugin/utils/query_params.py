"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Extract ``include`` and ``fields[type]`` into document formatter options.

    >>> parse_query_params({"include": "author,comments.author", "fields[people]": "name"})
    {'include': ['author', 'comments.author'], 'fields': {'people': ['name']}}
    """
    options: dict[str, Any] = {"include": [], "fields": {}}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == "include":
            options["include"] = _split_csv(raw_value)
        elif key.startswith("fields[") and key.endswith("]"):
            resource_type = key[len("fields[") : -1]
            if resource_type:
                options["fields"][resource_type] = _split_csv(raw_value)
    return options
