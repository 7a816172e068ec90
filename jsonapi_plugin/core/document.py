"""JSON:API document construction."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Mapping, Sequence

from jsonapi_plugin.records import Record, as_record
from jsonapi_plugin.serializers.base import ALL_RELATIONSHIPS, JSONAPISerializer

IncludeTree = dict[str, "IncludeTree"]


def parse_include(include: str | Iterable[str] | None) -> IncludeTree:
    """Turn include paths (``"author,comments.author"``) into a nested tree."""
    if not include:
        return {}
    paths = include.split(",") if isinstance(include, str) else include
    tree: IncludeTree = {}
    for path in paths:
        node = tree
        for part in (segment.strip() for segment in str(path).split(".")):
            if not part:
                continue
            node = node.setdefault(part, {})
    return tree


def normalize_fields(
    fields: Mapping[str, str | Iterable[str]] | None,
) -> dict[str, list[str]]:
    """Normalize a sparse fieldset mapping keyed by resource type."""
    normalized: dict[str, list[str]] = {}
    for type_name, names in (fields or {}).items():
        if isinstance(names, str):
            names = names.split(",")
        normalized[type_name] = [name.strip() for name in names if name and name.strip()]
    return normalized


class JSONAPIDocumentBuilder:
    """Build JSON:API documents from records.

    ``resource_document`` renders one resource with relationship linkage,
    ``compound_resource_document`` also side-loads the related resources
    named by ``include`` into ``included``, and ``resource_documents`` does
    the same for a collection with one ``included`` list shared by all
    primary resources.

    ``included`` is ordered by first discovery during a breadth-first walk:
    primary resources in input order, then relationships in include order.
    A resource appears at most once, and never if it is primary data.
    """

    serializer_class: type[JSONAPISerializer] = JSONAPISerializer

    def get_serializer(self) -> JSONAPISerializer:
        """Instantiate the serializer."""
        return self.serializer_class()

    def resource_document(
        self,
        record: Any,
        *,
        fields: Mapping[str, str | Iterable[str]] | None = None,
        include: str | Iterable[str] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a single resource document without side-loaded resources."""
        if record is None:
            return self.build_single(None, links=links, meta=meta)
        record = as_record(record)
        serializer = self.get_serializer()
        fields_map = normalize_fields(fields)
        names = [name for name, _ in self._children(record, parse_include(include))]
        resource = serializer.to_resource(
            record,
            fields=fields_map.get(serializer.get_type(record)),
            relationships=names,
        )
        return self.build_single(resource, links=links, meta=meta)

    def compound_resource_document(
        self,
        record: Any,
        *,
        fields: Mapping[str, str | Iterable[str]] | None = None,
        include: str | Iterable[str] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a single resource document with included resources."""
        tree = parse_include(include)
        if record is None or not tree:
            return self.resource_document(
                record, fields=fields, include=include, links=links, meta=meta
            )
        data, included = self._walk([as_record(record)], tree, normalize_fields(fields))
        return self.build_single(data[0], included=included, links=links, meta=meta)

    def resource_documents(
        self,
        records: Iterable[Any],
        *,
        fields: Mapping[str, str | Iterable[str]] | None = None,
        include: str | Iterable[str] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a collection document, side-loading when ``include`` is set."""
        primary = [as_record(record) for record in records]
        tree = parse_include(include)
        fields_map = normalize_fields(fields)
        if not tree:
            resources = self.get_serializer().to_many(primary, fields=fields_map)
            return self.build_collection(resources, links=links, meta=meta)
        data, included = self._walk(primary, tree, fields_map)
        return self.build_collection(data, included=included, links=links, meta=meta)

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        document: dict[str, Any] = {
            "data": dict(resource) if resource is not None else None
        }
        if included is not None:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources."""
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        if included is not None:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document

    def _walk(
        self,
        primary: Sequence[Record],
        tree: IncludeTree,
        fields_map: Mapping[str, list[str]],
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        serializer = self.get_serializer()
        resources: dict[tuple[str, str], dict[str, Any]] = {}
        data: list[dict[str, Any]] = []
        queue: deque[tuple[Record, tuple[str, ...], IncludeTree]] = deque()

        for record in primary:
            key = serializer.get_key(record)
            resource = serializer.to_resource(
                record,
                fields=fields_map.get(key[0]),
                relationships=[name for name, _ in self._children(record, tree)],
            )
            data.append(resource)
            resources.setdefault(key, resource)
            queue.append((record, (), tree))

        included: list[dict[str, Any]] = []
        # (type, id, include path) already expanded
        expanded: set[tuple[str, str, tuple[str, ...]]] = set()
        while queue:
            record, path, node = queue.popleft()
            key = serializer.get_key(record)
            if (*key, path) in expanded:
                continue
            expanded.add((*key, path))

            children = self._children(record, node)
            names = [name for name, _ in children]
            resource = resources.get(key)
            if resource is None:
                resource = serializer.to_resource(
                    record, fields=fields_map.get(key[0]), relationships=names
                )
                resources[key] = resource
                included.append(resource)
            else:
                self._merge_relationships(serializer, resource, record, names)

            for name, child in children:
                for related in serializer.related_records(record, name):
                    queue.append((related, path + (name,), child))
        return data, included

    def _children(
        self, record: Record, node: IncludeTree
    ) -> list[tuple[str, IncludeTree]]:
        """Return the relationships to follow from ``record`` at ``node``."""
        children = [(name, child) for name, child in node.items() if name != ALL_RELATIONSHIPS]
        if ALL_RELATIONSHIPS in node:
            explicit = set(node)
            children.extend(
                (name, node[ALL_RELATIONSHIPS])
                for name in record.relationship_names()
                if name not in explicit
            )
        return children

    def _merge_relationships(
        self,
        serializer: JSONAPISerializer,
        resource: dict[str, Any],
        record: Record,
        names: list[str],
    ) -> None:
        existing = resource.get("relationships", {})
        missing = [name for name in names if name not in existing]
        if not missing:
            return
        linkage = serializer.get_relationships(record, missing)
        if linkage:
            resource.setdefault("relationships", {}).update(linkage)
