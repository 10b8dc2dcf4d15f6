from __future__ import annotations

from datetime import datetime
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
async def resolve_book_by_id(info: strawberry.Info, id: str) -> Book | None:
    """
    Resolve a book by its ID.

    Soft-deleted books are returned as well.
    """
    async with get_async_session() as session:
        book = await repository.find_by_id(session, Books, id)
        if not book:
            logger.info("Book not found", book_id=id)
            return None

        from ..types.book import book_from_model

        return book_from_model(book)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book that is not soft-deleted."""
    async with get_async_session() as session:
        books = await repository.find(session, Books, is_deleted=False)

        from ..types.book import book_from_model

        return [book_from_model(book) for book in books]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Look up the author referenced by a book; one lookup per book."""
    async with get_async_session() as session:
        author = await repository.find_by_id(session, Authors, book.author_id)
        if not author:
            logger.warning(
                "Book references a missing author",
                book_id=str(book.id),
                author_id=book.author_id,
            )
            return None

        from ..types.author import author_from_model

        return author_from_model(author)


# Mutation resolvers
async def create_book(
    info: strawberry.Info,
    *,
    title: str,
    pages: int,
    author: str,
    year_of_publication: datetime | None,
) -> Book:
    """
    Create a book and register it on its author's back-reference list.

    The book is committed before the author is looked up. If the author does
    not exist the book stays stored and NotFoundError is raised. The new id
    is appended to an empty `book_ids` list and prepended to a non-empty one.
    """
    async with get_async_session() as session:
        book = await repository.create(
            session,
            Books,
            title=title,
            pages=pages,
            author_id=author,
            year_of_publication=year_of_publication,
        )

        owner = await repository.find_by_id(session, Authors, author)
        if not owner:
            logger.warning("Book created for unknown author", book_id=book.id, author_id=author)
            raise NotFoundError("could not find the author specified")

        if len(owner.book_ids or []) < 1:
            owner.book_ids = [book.id]
        else:
            owner.book_ids = [book.id, *owner.book_ids]
        await repository.save(session, owner)

        logger.info("Book created", book_id=book.id, author_id=owner.id, title=book.title)

        from ..types.book import book_from_model

        return book_from_model(book)


async def update_book(
    info: strawberry.Info,
    id: str,
    *,
    title: str | None = None,
    pages: int | None = None,
    author: str | None = None,
) -> Book | None:
    """
    Partially update a book.

    A new `author` is neither validated nor reflected in any author's
    `book_ids` list.
    """
    fields = {"title": title, "pages": pages, "author_id": author}

    async with get_async_session() as session:
        book = await repository.update(session, Books, id, fields)
        if not book:
            logger.info("Book not found for update", book_id=id)
            return None

        logger.info(
            "Book updated",
            book_id=book.id,
            updated_fields=[k for k, v in fields.items() if v is not None],
        )

        from ..types.book import book_from_model

        return book_from_model(book)


async def delete_book(info: strawberry.Info, id: str) -> Book:
    """Toggle the soft-delete flag of a book; a second call restores it."""
    async with get_async_session() as session:
        book = await repository.find_by_id(session, Books, id)
        if not book:
            raise NotFoundError("Error deleting book: Book not found")

        book.is_deleted = not book.is_deleted
        book = await repository.save(session, book)

        logger.info("Book delete toggled", book_id=book.id, is_deleted=book.is_deleted)

        from ..types.book import book_from_model

        return book_from_model(book)
