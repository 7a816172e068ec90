"""SQLAlchemy integration for JSON:API records."""

from .record import SQLAlchemyRecord, is_mapped_instance

__all__ = ["SQLAlchemyRecord", "is_mapped_instance"]
