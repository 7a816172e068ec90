"""Record interface consumed by the document formatter."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from jsonapi_plugin.exceptions import InvalidRecordError
from jsonapi_plugin.sqlalchemy.record import SQLAlchemyRecord, is_mapped_instance


@runtime_checkable
class Record(Protocol):
    """Anything that can be rendered as a JSON:API resource object."""

    def resource_type(self) -> str:
        ...

    def resource_id(self) -> Any:
        ...

    def attributes(self) -> Mapping[str, Any]:
        ...

    def relationship(self, name: str) -> Any:
        ...

    def relationship_names(self) -> Sequence[str]:
        ...


class ResourceRecord:
    """In-memory record built from plain values.

    Relationship values may be another record, a mapping in resource form,
    a list of either, or ``None``. The relationships mapping is kept by
    reference so cyclic graphs can be wired up after construction::

        alice = ResourceRecord("people", 1, {"name": "Alice"})
        bob = ResourceRecord("people", 2, {"name": "Bob"}, {"friend": alice})
        alice.relationships["friend"] = bob
    """

    def __init__(
        self,
        type_: str,
        id_: Any,
        attributes: Mapping[str, Any] | None = None,
        relationships: dict[str, Any] | None = None,
    ) -> None:
        self.type_ = type_
        self.id_ = id_
        self.attrs = dict(attributes or {})
        self.relationships = relationships if relationships is not None else {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ResourceRecord":
        """Build a record from ``{"type", "id", "attributes", "relationships"}``."""
        if "type" not in data or "id" not in data:
            raise InvalidRecordError("Resource mapping must provide 'type' and 'id'.")
        return cls(
            data["type"],
            data["id"],
            data.get("attributes"),
            dict(data.get("relationships") or {}),
        )

    def resource_type(self) -> str:
        return self.type_

    def resource_id(self) -> Any:
        return self.id_

    def attributes(self) -> Mapping[str, Any]:
        return self.attrs

    def relationship(self, name: str) -> Any:
        return self.relationships.get(name)

    def relationship_names(self) -> Sequence[str]:
        return list(self.relationships)

    def __repr__(self) -> str:
        return f"ResourceRecord({self.type_!r}, {self.id_!r})"


def as_record(value: Any) -> Record:
    """Normalize a record-like value into a :class:`Record`."""
    if isinstance(value, Record):
        return value
    if isinstance(value, Mapping):
        return ResourceRecord.from_mapping(value)
    if is_mapped_instance(value):
        return SQLAlchemyRecord(value)
    raise InvalidRecordError(
        f"Cannot build a resource object from {type(value).__name__!s} value."
    )


def as_records(value: Any) -> list[Record]:
    """Normalize a relationship value into a list of records."""
    if value is None:
        return []
    if isinstance(value, (Mapping, Record)) or not isinstance(value, Iterable):
        return [as_record(value)]
    if isinstance(value, (str, bytes)):
        raise InvalidRecordError("Relationship value cannot be a string.")
    return [as_record(item) for item in value]


def is_to_many(value: Any) -> bool:
    """Return True if a relationship value holds a sequence of records."""
    if value is None or isinstance(value, (Mapping, Record, str, bytes)):
        return False
    return isinstance(value, Iterable)
