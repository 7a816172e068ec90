"""Record sources for the document formatter."""

from .base import Record, ResourceRecord, as_record, as_records, is_to_many

__all__ = ["Record", "ResourceRecord", "as_record", "as_records", "is_to_many"]
