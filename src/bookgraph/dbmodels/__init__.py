"""
Database models for bookgraph (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

Books reference their author by id only. There is no foreign key between
`books.author_id` and `authors.id`: the reference is checked when a book is
created and never afterwards. `Authors.book_ids` is a denormalized list of
book ids kept alongside it; it is only written when a book is created.

Rows are addressed by their opaque `id`. The integer `seq` primary key only
records insertion order, which listings sort by.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    false,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_id() -> str:
    """Return a new opaque identifier (UUID4 string)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Authors(Base):
    __tablename__ = "authors"
    __table_args__ = (
        PrimaryKeyConstraint("seq", name="authors_pkey"),
        UniqueConstraint("id", name="uq_authors_id"),
        Index("idx_authors_is_deleted", "is_deleted"),
    )

    seq: Mapped[int] = mapped_column(Integer, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, default=generate_id)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    book_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow, onupdate=utcnow)


class Books(Base):
    __tablename__ = "books"
    __table_args__ = (
        PrimaryKeyConstraint("seq", name="books_pkey"),
        UniqueConstraint("id", name="uq_books_id"),
        Index("idx_books_author", "author_id"),
        Index("idx_books_is_deleted", "is_deleted"),
    )

    seq: Mapped[int] = mapped_column(Integer, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, default=generate_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    author_id: Mapped[str] = mapped_column(String(36), nullable=False)
    year_of_publication: Mapped[datetime | None] = mapped_column(DateTime(True))
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow, onupdate=utcnow)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("seq", name="users_pkey"),
        UniqueConstraint("id", name="uq_users_id"),
        Index("idx_users_email", "email"),
    )

    seq: Mapped[int] = mapped_column(Integer, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, default=generate_id)
    first_name: Mapped[str | None] = mapped_column(String(255))
    last_name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
    password: Mapped[str | None] = mapped_column(String(255))
    profile_picture: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(String(50))
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow, onupdate=utcnow)


# Expose metadata for Alembic
target_metadata = Base.metadata
