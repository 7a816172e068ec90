"""Expose SQLAlchemy model instances as JSON:API records."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.inspection import inspect
from sqlalchemy.orm.exc import DetachedInstanceError

from jsonapi_plugin.exceptions import InvalidRecordError

logger = logging.getLogger(__name__)


def is_mapped_instance(value: Any) -> bool:
    """Return True if ``value`` is an instance of a mapped class."""
    if value is None or isinstance(value, type):
        return False
    try:
        inspect(value.__class__)
    except NoInspectionAvailable:
        return False
    return True


class SQLAlchemyRecord:
    """Record adapter over a mapped instance.

    The resource type is taken from ``__jsonapi_type__`` on the model when
    present, then ``__tablename__``, then the lowercased class name.
    Attributes are the mapped columns minus the primary and foreign keys;
    foreign keys surface as relationship linkage instead. Unloaded
    relationships are lazy loaded through the instance's session. On a
    detached instance they render as empty linkage, so eager load what the
    document needs (``selectinload``/``joinedload``) before closing the
    session.
    """

    def __init__(self, instance: Any, *, type_: str | None = None) -> None:
        try:
            self._mapper = inspect(instance.__class__)
        except NoInspectionAvailable as exc:
            raise InvalidRecordError(
                f"{instance.__class__.__name__} is not a mapped class."
            ) from exc
        self.instance = instance
        self._type = type_

    def resource_type(self) -> str:
        if self._type:
            return self._type
        model = self.instance.__class__
        type_name = getattr(model, "__jsonapi_type__", None) or getattr(
            model, "__tablename__", None
        )
        return type_name or model.__name__.lower()

    def resource_id(self) -> Any:
        values = [
            getattr(self.instance, self._mapper.get_property_by_column(column).key)
            for column in self._mapper.primary_key
        ]
        if any(value is None for value in values):
            return None
        if len(values) == 1:
            return values[0]
        return ",".join(str(value) for value in values)

    def attributes(self) -> Mapping[str, Any]:
        primary_keys = {
            self._mapper.get_property_by_column(column).key
            for column in self._mapper.primary_key
        }
        return {
            prop.key: getattr(self.instance, prop.key)
            for prop in self._mapper.column_attrs
            if prop.key not in primary_keys
            and not any(column.foreign_keys for column in prop.columns)
        }

    def relationship(self, name: str) -> Any:
        rel = self._mapper.relationships.get(name)
        if rel is None:
            return None
        try:
            related = getattr(self.instance, name)
        except DetachedInstanceError:
            logger.debug(
                "Relationship %s.%s is not loaded on a detached instance, rendering empty linkage",
                self.instance.__class__.__name__,
                name,
            )
            return [] if rel.uselist else None
        if rel.uselist:
            return [SQLAlchemyRecord(item) for item in related or ()]
        if related is None:
            return None
        return SQLAlchemyRecord(related)

    def relationship_names(self) -> Sequence[str]:
        return [rel.key for rel in self._mapper.relationships]

    def __repr__(self) -> str:
        return f"SQLAlchemyRecord({self.instance!r})"
