"""Shared fixtures: a small blog graph of in-memory records.

    posts/1 "Hello"  author -> people/1, comments -> [comments/10, comments/11]
    posts/2 "Again"  author -> people/2, comments -> [comments/12]
    comments/10      author -> people/2, post -> posts/1
    comments/11      author -> people/1, post -> posts/1
    comments/12      author -> people/1, post -> posts/2
    people/1 <-> people/2 through "friend" (a cycle)
"""

import pytest

from jsonapi_plugin.records import ResourceRecord


class Blog:
    def __init__(self) -> None:
        self.alice = ResourceRecord("people", 1, {"name": "Alice", "email": "alice@example.com"})
        self.bob = ResourceRecord("people", 2, {"name": "Bob", "email": "bob@example.com"})
        self.alice.relationships["friend"] = self.bob
        self.bob.relationships["friend"] = self.alice

        self.post1 = ResourceRecord("posts", 1, {"title": "Hello", "body": "First post"})
        self.post2 = ResourceRecord("posts", 2, {"title": "Again", "body": "Second post"})

        self.c10 = ResourceRecord("comments", 10, {"body": "Nice"}, {"author": self.bob, "post": self.post1})
        self.c11 = ResourceRecord("comments", 11, {"body": "Thanks"}, {"author": self.alice, "post": self.post1})
        self.c12 = ResourceRecord("comments", 12, {"body": "Again?"}, {"author": self.alice, "post": self.post2})

        self.post1.relationships.update(
            {"author": self.alice, "comments": [self.c10, self.c11], "tags": []}
        )
        self.post2.relationships.update(
            {"author": self.bob, "comments": [self.c12], "tags": []}
        )
        self.alice.relationships["posts"] = [self.post1]
        self.bob.relationships["posts"] = [self.post2]


@pytest.fixture
def blog() -> Blog:
    return Blog()
