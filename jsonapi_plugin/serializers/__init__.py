"""Resource object serializers."""

from .base import ALL_RELATIONSHIPS, JSONAPISerializer

__all__ = ["ALL_RELATIONSHIPS", "JSONAPISerializer"]
