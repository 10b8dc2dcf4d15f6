"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ..scalars import Date

if TYPE_CHECKING:
    from ...dbmodels import Authors
    from .book import Book


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str
    age: int
    is_deleted: bool
    created_at: Date | None
    updated_at: Date | None
    book_ids: list[strawberry.ID] = strawberry.field(
        description="Cached back-reference list; may lag behind `books`."
    )

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")]]:  # noqa: E501
        """Get every book that references this author."""
        from ..resolvers.author import resolve_author_books

        return await resolve_author_books(self, info)


def author_from_model(author: "Authors") -> Author:
    """Convert an `Authors` row to the GraphQL type."""
    return Author(
        id=strawberry.ID(author.id),
        first_name=author.first_name,
        last_name=author.last_name,
        email=author.email,
        age=author.age,
        is_deleted=author.is_deleted,
        created_at=author.created_at,
        updated_at=author.updated_at,
        book_ids=[strawberry.ID(book_id) for book_id in author.book_ids or []],
    )
