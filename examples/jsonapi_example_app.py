"""Example FastAPI app using the JSON:API plugin with relationships.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload

Try:
    GET /api/articles?include=author,comments.author
    GET /api/articles/1?include=comments&fields[users]=name
    GET /api/articles/1/relationships/comments
"""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, relationship, selectinload, sessionmaker
from sqlalchemy.pool import StaticPool

from jsonapi_plugin import JSONAPI

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")
    comments = relationship("Comment", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    author_id = Column(Integer, ForeignKey("users.id"))
    article = relationship("Article", back_populates="comments")
    author = relationship("User", back_populates="comments")


def seed_example_data(session: Session) -> None:
    """Insert example users, articles and comments if empty."""
    if session.execute(select(User.id).limit(1)).first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com")
    john = User(name="John Smith", email="john.smith@example.com")
    article = Article(title="JSON:API with FastAPI", body="An example article.", author=jane)
    Comment(body="Great article!", article=article, author=john)
    Comment(body="Thanks for sharing.", article=article, author=jane)
    session.add_all([jane, john, article])
    session.commit()


def _article_query() -> Any:
    return select(Article).options(
        selectinload(Article.author),
        selectinload(Article.comments).selectinload(Comment.author),
    )


class ArticlesController:
    """Implements the actions planned for the ``article`` resource."""

    def __init__(self, jsonapi: JSONAPI) -> None:
        self.jsonapi = jsonapi

    def fetch_articles(self, request: Request) -> Any:
        with SessionLocal() as session:
            articles = session.scalars(_article_query()).all()
            return self.jsonapi.resource_documents(
                articles, **self.jsonapi.document_options(request)
            )

    def get_article(self, request: Request, article_id: int) -> Any:
        with SessionLocal() as session:
            article = session.scalars(_article_query().where(Article.id == article_id)).first()
            if article is None:
                return self.jsonapi.render_error(404)
            return self.jsonapi.compound_resource_document(
                article, **self.jsonapi.document_options(request)
            )

    def delete_article(self, article_id: int) -> Any:
        with SessionLocal() as session:
            article = session.get(Article, article_id)
            if article is None:
                return self.jsonapi.render_error(404)
            session.delete(article)
            session.commit()
        return {"meta": {"deleted": True}}

    def get_related_author(self, article_id: int) -> Any:
        return self._relationship(article_id, "author")

    def get_related_comments(self, article_id: int) -> Any:
        return self._relationship(article_id, "comments")

    def _relationship(self, article_id: int, name: str) -> Any:
        with SessionLocal() as session:
            article = session.scalars(_article_query().where(Article.id == article_id)).first()
            if article is None:
                return self.jsonapi.render_error(404)
            document = self.jsonapi.resource_document(article, include=[name])
            return document["data"]["relationships"][name]


app = FastAPI(
    title="FastAPI JSON:API Example",
    description="Example API showcasing the JSON:API plugin.",
    version="0.1.0",
)
jsonapi = JSONAPI(namespace="api")

# Actions the controller leaves out (post_article, patch_article, ...) are
# skipped with a warning.
jsonapi.resource_routes(
    {"resource": "article", "relationships": ["author", "comments"]},
    ArticlesController(jsonapi),
)
jsonapi.install(app)


@app.on_event("startup")
def on_startup() -> None:
    Base.metadata.create_all(engine)
    with SessionLocal() as session:
        seed_example_data(session)
