"""Tests for resource, compound and collection documents."""

import pytest

from jsonapi_plugin import ALL_RELATIONSHIPS, InvalidRecordError, JSONAPIDocumentBuilder
from jsonapi_plugin.core.document import normalize_fields, parse_include
from jsonapi_plugin.records import ResourceRecord
from jsonapi_plugin.schemas import JSONAPIDocument


def keys(resources):
    return [(resource["type"], resource["id"]) for resource in resources]


@pytest.fixture
def builder():
    return JSONAPIDocumentBuilder()


class TestParseInclude:
    def test_nested_paths_share_prefixes(self):
        assert parse_include(["author", "comments.author", "comments.post"]) == {
            "author": {},
            "comments": {"author": {}, "post": {}},
        }

    def test_comma_separated_string(self):
        assert parse_include("author, comments.author") == {
            "author": {},
            "comments": {"author": {}},
        }

    def test_empty(self):
        assert parse_include(None) == {}
        assert parse_include("") == {}
        assert parse_include([".", ""]) == {}

    def test_normalize_fields_splits_strings(self):
        assert normalize_fields({"people": "name, email", "posts": ["title"]}) == {
            "people": ["name", "email"],
            "posts": ["title"],
        }


class TestResourceDocument:
    def test_attributes_only_without_include(self, builder, blog):
        document = builder.resource_document(blog.post1)

        assert document == {
            "data": {
                "type": "posts",
                "id": "1",
                "attributes": {"title": "Hello", "body": "First post"},
            }
        }

    def test_include_surfaces_relationship_linkage(self, builder, blog):
        document = builder.resource_document(blog.post1, include=["author", "comments"])

        assert document["data"]["relationships"] == {
            "author": {"data": {"type": "people", "id": "1"}},
            "comments": {
                "data": [
                    {"type": "comments", "id": "10"},
                    {"type": "comments", "id": "11"},
                ]
            },
        }
        assert "included" not in document
        JSONAPIDocument.model_validate(document)

    def test_nested_include_only_uses_first_segment(self, builder, blog):
        document = builder.resource_document(blog.post1, include="comments.author")

        assert list(document["data"]["relationships"]) == ["comments"]

    def test_all_relationships(self, builder, blog):
        document = builder.resource_document(blog.post1, include=ALL_RELATIONSHIPS)

        assert list(document["data"]["relationships"]) == ["author", "comments", "tags"]

    def test_sparse_fields_per_type(self, builder, blog):
        document = builder.resource_document(
            blog.post1, fields={"posts": ["title"], "people": ["name"]}
        )

        assert document["data"]["attributes"] == {"title": "Hello"}

    def test_empty_relationships_keep_their_key(self, builder, blog):
        orphan = ResourceRecord("posts", 3, {"title": "Draft"}, {"author": None, "tags": []})

        document = builder.resource_document(orphan, include=["author", "tags"])

        assert document["data"]["relationships"] == {
            "author": {"data": None},
            "tags": {"data": []},
        }

    def test_unknown_relationship_is_skipped(self, builder, blog):
        document = builder.resource_document(blog.post1, include=["reviewers"])

        assert "relationships" not in document["data"]

    def test_none_record(self, builder):
        assert builder.resource_document(None) == {"data": None}

    def test_mapping_record(self, builder):
        document = builder.resource_document(
            {"type": "posts", "id": 5, "attributes": {"title": "From a dict"}}
        )

        assert document["data"] == {
            "type": "posts",
            "id": "5",
            "attributes": {"title": "From a dict"},
        }

    def test_links_and_meta_are_copied(self, builder, blog):
        document = builder.resource_document(
            blog.post1, links={"self": "/api/posts/1"}, meta={"version": 2}
        )

        assert document["links"] == {"self": "/api/posts/1"}
        assert document["meta"] == {"version": 2}

    @pytest.mark.parametrize(
        "record",
        [
            ResourceRecord("posts", None),
            ResourceRecord("posts", ""),
            ResourceRecord("", 1),
            {"type": "posts"},
            object(),
        ],
    )
    def test_invalid_records(self, builder, record):
        with pytest.raises(InvalidRecordError):
            builder.resource_document(record)

    def test_invalid_related_record(self, builder):
        broken = ResourceRecord("posts", 1, {}, {"author": ResourceRecord("people", None)})

        with pytest.raises(InvalidRecordError):
            builder.resource_document(broken, include="author")


class TestCompoundResourceDocument:
    def test_single_include(self, builder, blog):
        document = builder.compound_resource_document(blog.post1, include="author")

        assert document["included"] == [
            {
                "type": "people",
                "id": "1",
                "attributes": {"name": "Alice", "email": "alice@example.com"},
            }
        ]
        JSONAPIDocument.model_validate(document)

    def test_nested_include_is_breadth_first(self, builder, blog):
        document = builder.compound_resource_document(blog.post1, include="comments.author")

        assert keys(document["included"]) == [
            ("comments", "10"),
            ("comments", "11"),
            ("people", "2"),
            ("people", "1"),
        ]
        assert document["included"][0]["relationships"] == {
            "author": {"data": {"type": "people", "id": "2"}}
        }
        assert "relationships" not in document["included"][2]

    def test_resource_reached_twice_is_included_once(self, builder, blog):
        document = builder.compound_resource_document(
            blog.post1, include=["author", "comments.author"]
        )

        assert keys(document["included"]) == [
            ("people", "1"),
            ("comments", "10"),
            ("comments", "11"),
            ("people", "2"),
        ]

    def test_cycle_terminates(self, builder, blog):
        document = builder.compound_resource_document(
            blog.post1, include="author.friend.friend.friend.friend"
        )

        assert keys(document["included"]) == [("people", "1"), ("people", "2")]
        alice, bob = document["included"]
        assert alice["relationships"] == {"friend": {"data": {"type": "people", "id": "2"}}}
        assert bob["relationships"] == {"friend": {"data": {"type": "people", "id": "1"}}}

    def test_primary_resource_is_never_included(self, builder, blog):
        document = builder.compound_resource_document(blog.alice, include="friend.friend")

        assert keys(document["included"]) == [("people", "2")]
        assert document["data"]["relationships"] == {
            "friend": {"data": {"type": "people", "id": "2"}}
        }

    def test_back_reference_to_primary(self, builder, blog):
        document = builder.compound_resource_document(blog.c10, include="post.comments")

        assert keys(document["included"]) == [("posts", "1"), ("comments", "11")]

    def test_linkage_merged_across_paths(self, builder, blog):
        document = builder.compound_resource_document(
            blog.post1, include=["author", "comments.author.friend"]
        )

        included = {(item["type"], item["id"]): item for item in document["included"]}
        assert included[("people", "1")]["relationships"] == {
            "friend": {"data": {"type": "people", "id": "2"}}
        }
        assert len(document["included"]) == len(included)

    def test_wildcard_follows_every_relationship(self, builder, blog):
        document = builder.compound_resource_document(blog.post1, include="*")

        assert keys(document["included"]) == [
            ("people", "1"),
            ("comments", "10"),
            ("comments", "11"),
        ]

    def test_sparse_fields_apply_to_included(self, builder, blog):
        document = builder.compound_resource_document(
            blog.post1, include="author", fields={"people": ["name"]}
        )

        assert document["included"][0]["attributes"] == {"name": "Alice"}
        assert document["data"]["attributes"] == {"title": "Hello", "body": "First post"}

    def test_unrequested_relationships_are_not_traversed(self, builder, blog):
        document = builder.compound_resource_document(blog.post1, include="tags")

        assert document["included"] == []
        assert document["data"]["relationships"] == {"tags": {"data": []}}

    def test_unknown_include_gives_empty_included(self, builder, blog):
        document = builder.compound_resource_document(blog.post1, include="reviewers")

        assert document["included"] == []
        assert "relationships" not in document["data"]

    def test_without_include(self, builder, blog):
        document = builder.compound_resource_document(blog.post1)

        assert "included" not in document

    def test_none_record(self, builder):
        assert builder.compound_resource_document(None, include="author") == {"data": None}


class TestResourceDocuments:
    def test_empty_collection(self, builder):
        assert builder.resource_documents([]) == {"data": []}

    def test_without_include(self, builder, blog):
        document = builder.resource_documents([blog.post1, blog.post2])

        assert keys(document["data"]) == [("posts", "1"), ("posts", "2")]
        assert "included" not in document
        assert all("relationships" not in item for item in document["data"])

    def test_included_is_deduplicated_across_the_collection(self, builder, blog):
        document = builder.resource_documents(
            [blog.post1, blog.post2], include="comments.author"
        )

        assert keys(document["included"]) == [
            ("comments", "10"),
            ("comments", "11"),
            ("comments", "12"),
            ("people", "2"),
            ("people", "1"),
        ]
        JSONAPIDocument.model_validate(document)

    def test_shared_related_resource(self, builder, blog):
        blog.post2.relationships["author"] = blog.alice

        document = builder.resource_documents([blog.post1, blog.post2], include="author")

        assert keys(document["included"]) == [("people", "1")]

    def test_primaries_are_not_included(self, builder, blog):
        document = builder.resource_documents(
            [blog.post1, blog.post2], include="comments.post"
        )

        assert keys(document["included"]) == [
            ("comments", "10"),
            ("comments", "11"),
            ("comments", "12"),
        ]

    def test_accepts_a_generator(self, builder, blog):
        records = (record for record in [blog.post1, blog.post2])

        document = builder.resource_documents(records, include="author")

        assert keys(document["data"]) == [("posts", "1"), ("posts", "2")]
        assert keys(document["included"]) == [("people", "1"), ("people", "2")]

    def test_sparse_fields(self, builder, blog):
        document = builder.resource_documents(
            [blog.post1, blog.alice], fields={"posts": "title"}
        )

        assert document["data"][0]["attributes"] == {"title": "Hello"}
        assert document["data"][1]["attributes"] == {
            "name": "Alice",
            "email": "alice@example.com",
        }

    def test_meta_hook(self, builder, blog):
        document = builder.resource_documents(
            [blog.post1], meta={"total": 2}, links={"next": "/api/posts?page[offset]=1"}
        )

        assert document["meta"] == {"total": 2}
        assert document["links"] == {"next": "/api/posts?page[offset]=1"}
