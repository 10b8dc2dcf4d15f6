"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..scalars import Date

if TYPE_CHECKING:
    from ...dbmodels import Books
    from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    title: str
    pages: int
    is_deleted: bool
    year_of_publication: Date | None
    created_at: Date | None
    updated_at: Date | None
    author_id: strawberry.Private[str]

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:  # noqa: E501
        """Get the author this book references."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)


def book_from_model(book: "Books") -> Book:
    """Convert a `Books` row to the GraphQL type."""
    return Book(
        id=strawberry.ID(book.id),
        title=book.title,
        pages=book.pages,
        is_deleted=book.is_deleted,
        year_of_publication=book.year_of_publication,
        created_at=book.created_at,
        updated_at=book.updated_at,
        author_id=book.author_id,
    )
