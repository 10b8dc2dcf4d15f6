from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ... import repository
from ...database.connection import get_async_session
from ...dbmodels import Authors, Books
from ...logging import get_logger
from ..errors import NotFoundError

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    """
    Resolve an author by its ID.

    Soft-deleted authors are returned as well.
    """
    async with get_async_session() as session:
        author = await repository.find_by_id(session, Authors, id)
        if not author:
            logger.info("Author not found", author_id=id)
            return None

        from ..types.author import author_from_model

        return author_from_model(author)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author that is not soft-deleted."""
    async with get_async_session() as session:
        authors = await repository.find(session, Authors, is_deleted=False)

        from ..types.author import author_from_model

        return [author_from_model(author) for author in authors]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """
    Get the books of an author by querying books on their `author_id`.

    This ignores the cached `book_ids` list, which is never pruned, so the
    result stays correct after a book is reassigned to another author.
    Soft-deleted books are included.
    """
    async with get_async_session() as session:
        books = await repository.find(session, Books, author_id=str(author.id))

        from ..types.book import book_from_model

        return [book_from_model(book) for book in books]


# Mutation resolvers
async def create_author(
    info: strawberry.Info,
    *,
    first_name: str,
    last_name: str,
    email: str,
    age: int,
) -> Author:
    """Create an author with an empty book list."""
    async with get_async_session() as session:
        author = await repository.create(
            session,
            Authors,
            first_name=first_name,
            last_name=last_name,
            email=email,
            age=age,
            book_ids=[],
        )

        logger.info("Author created", author_id=author.id)

        from ..types.author import author_from_model

        return author_from_model(author)


async def update_author(
    info: strawberry.Info,
    id: str,
    *,
    first_name: str | None = None,
    last_name: str | None = None,
    email: str | None = None,
    age: int | None = None,
) -> Author | None:
    """Partially update an author. Returns None when the id is unknown."""
    fields = {"first_name": first_name, "last_name": last_name, "email": email, "age": age}

    async with get_async_session() as session:
        author = await repository.update(session, Authors, id, fields)
        if not author:
            logger.info("Author not found for update", author_id=id)
            return None

        logger.info(
            "Author updated",
            author_id=author.id,
            updated_fields=[k for k, v in fields.items() if v is not None],
        )

        from ..types.author import author_from_model

        return author_from_model(author)


async def delete_author(info: strawberry.Info, id: str) -> Author:
    """Toggle the soft-delete flag of an author; a second call restores it."""
    async with get_async_session() as session:
        author = await repository.find_by_id(session, Authors, id)
        if not author:
            raise NotFoundError("Error deleting author: Author not found")

        author.is_deleted = not author.is_deleted
        author = await repository.save(session, author)

        logger.info("Author delete toggled", author_id=author.id, is_deleted=author.is_deleted)

        from ..types.author import author_from_model

        return author_from_model(author)
