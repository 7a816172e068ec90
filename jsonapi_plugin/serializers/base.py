"""Serialize records into JSON:API resource objects."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from jsonapi_plugin.exceptions import InvalidRecordError
from jsonapi_plugin.records import Record, as_record, as_records, is_to_many

logger = logging.getLogger(__name__)

ALL_RELATIONSHIPS = "*"


class JSONAPISerializer:
    """Turn records into resource objects and resource identifiers."""

    def to_resource(
        self,
        record: Record,
        *,
        fields: Iterable[str] | None = None,
        relationships: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Serialize a record into a JSON:API resource object.

        ``fields`` restricts the attributes, ``relationships`` names the
        relationships surfaced as linkage. ``"*"`` surfaces all of them.
        """
        resource: dict[str, Any] = {
            "type": self.get_type(record),
            "id": self.get_id(record),
            "attributes": self.get_attributes(record, fields=fields),
        }
        if relationships:
            linkage = self.get_relationships(record, relationships)
            if linkage:
                resource["relationships"] = linkage
        return resource

    def to_many(
        self,
        records: Iterable[Record],
        *,
        fields: Mapping[str, Iterable[str]] | None = None,
        relationships: Iterable[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Serialize a collection of records."""
        fields = fields or {}
        resources = []
        for record in records:
            resources.append(
                self.to_resource(
                    record,
                    fields=fields.get(self.get_type(record)),
                    relationships=relationships,
                )
            )
        return resources

    def get_type(self, record: Record) -> str:
        """Return the resource type, failing if the record has none."""
        try:
            type_name = record.resource_type()
        except (AttributeError, KeyError) as exc:
            raise InvalidRecordError(f"{record!r} does not provide a resource type.") from exc
        if not type_name or not isinstance(type_name, str):
            raise InvalidRecordError(f"{record!r} does not provide a resource type.")
        return type_name

    def get_id(self, record: Record) -> str:
        """Return the resource id as a string, failing if the record has none."""
        try:
            value = record.resource_id()
        except (AttributeError, KeyError) as exc:
            raise InvalidRecordError(f"{record!r} does not provide a resource id.") from exc
        if value is None or str(value) == "":
            raise InvalidRecordError(f"{record!r} does not provide a resource id.")
        return str(value)

    def get_key(self, record: Record) -> tuple[str, str]:
        """Return the ``(type, id)`` pair identifying a record in a document."""
        return self.get_type(record), self.get_id(record)

    def get_attributes(
        self, record: Record, *, fields: Iterable[str] | None = None
    ) -> dict[str, Any]:
        """Return attributes, restricted to ``fields`` when given."""
        attributes = {
            key: value
            for key, value in (record.attributes() or {}).items()
            if key not in ("id", "type")
        }
        if fields is not None:
            allowed_fields = set(fields)
            attributes = {
                key: value for key, value in attributes.items() if key in allowed_fields
            }
        return attributes

    def get_relationships(
        self, record: Record, names: Iterable[str]
    ) -> dict[str, Any]:
        """Return relationship objects for the requested relationship names.

        Names the record does not declare are skipped.
        """
        declared = list(record.relationship_names())
        requested = list(names)
        if ALL_RELATIONSHIPS in requested:
            requested = [name for name in requested if name != ALL_RELATIONSHIPS]
            requested.extend(name for name in declared if name not in requested)

        relationships: dict[str, Any] = {}
        for name in requested:
            if name not in declared:
                logger.debug(
                    "%s has no relationship %r, skipping", self.get_type(record), name
                )
                continue
            relationships[name] = self.relationship_object(record, name)
        return relationships

    def relationship_object(self, record: Record, name: str) -> dict[str, Any]:
        """Build the relationship object holding identifiers only."""
        related = record.relationship(name)
        if is_to_many(related):
            return {"data": [self.identifier(item) for item in as_records(related)]}
        if related is None:
            return {"data": None}
        return {"data": self.identifier(as_record(related))}

    def related_records(self, record: Record, name: str) -> list[Record]:
        """Return the records reachable through one relationship."""
        if name not in record.relationship_names():
            return []
        return as_records(record.relationship(name))

    def identifier(self, record: Record) -> dict[str, str]:
        """Return the resource identifier object for a record."""
        return {"type": self.get_type(record), "id": self.get_id(record)}
