"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # Book queries
    @strawberry.field(name="findBookById")
    async def find_book_by_id(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> Book | None:
        """Get a book by ID, deleted or not."""
        if id is None:
            return None
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, str(id))

    @strawberry.field(name="getBooks")
    async def get_books(self, info: strawberry.Info) -> list[Book]:
        """Get all books that are not deleted."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    # Author queries
    @strawberry.field(name="findAuthorById")
    async def find_author_by_id(
        self, info: strawberry.Info, id: strawberry.ID | None = None
    ) -> Author | None:
        """Get an author by ID, deleted or not."""
        if id is None:
            return None
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, str(id))

    @strawberry.field(name="getAuthors")
    async def get_authors(self, info: strawberry.Info) -> list[Author]:
        """Get all authors that are not deleted."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)

    # User queries
    @strawberry.field(name="getUserById")
    async def get_user_by_id(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID; fails when the user does not exist."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, str(id))

    @strawberry.field(name="getUsers")
    async def get_users(self, info: strawberry.Info) -> list[User]:
        """Get all users that are not deleted."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)
