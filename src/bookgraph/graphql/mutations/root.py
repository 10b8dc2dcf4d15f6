"""
Root GraphQL mutation definitions

Every mutation is nullable so that a failing field reports its error
without nulling out sibling fields of the same document.
"""

import strawberry

from ..scalars import Date
from ..types.author import Author
from ..types.book import Book
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Book mutations
    @strawberry.mutation(name="createBook")
    async def create_book(
        self,
        info: strawberry.Info,
        title: str,
        pages: int,
        author: strawberry.ID,
        year_of_publication: Date,
    ) -> Book | None:
        """Create a book and add it to its author's book list."""
        from ..resolvers.book import create_book

        return await create_book(
            info,
            title=title,
            pages=pages,
            author=str(author),
            year_of_publication=year_of_publication,
        )

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        title: str | None = None,
        pages: int | None = None,
        author: strawberry.ID | None = None,
    ) -> Book | None:
        """Update the provided fields of a book."""
        from ..resolvers.book import update_book

        return await update_book(
            info,
            str(id),
            title=title,
            pages=pages,
            author=str(author) if author is not None else None,
        )

    @strawberry.mutation(name="deleteBook")
    async def delete_book(self, info: strawberry.Info, id: strawberry.ID) -> Book | None:
        """Toggle the deleted flag of a book."""
        from ..resolvers.book import delete_book

        return await delete_book(info, str(id))

    # Author mutations
    @strawberry.mutation(name="createAuthor")
    async def create_author(
        self,
        info: strawberry.Info,
        first_name: str,
        last_name: str,
        email: str,
        age: int,
    ) -> Author | None:
        """Create a new author."""
        from ..resolvers.author import create_author

        return await create_author(
            info, first_name=first_name, last_name=last_name, email=email, age=age
        )

    @strawberry.mutation(name="updateAuthor")
    async def update_author(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        age: int | None = None,
    ) -> Author | None:
        """Update the provided fields of an author."""
        from ..resolvers.author import update_author

        return await update_author(
            info, str(id), first_name=first_name, last_name=last_name, email=email, age=age
        )

    @strawberry.mutation(name="deleteAuthor")
    async def delete_author(self, info: strawberry.Info, id: strawberry.ID) -> Author | None:
        """Toggle the deleted flag of an author."""
        from ..resolvers.author import delete_author

        return await delete_author(info, str(id))

    # User mutations
    @strawberry.mutation(name="registerUser")
    async def register_user(self, info: strawberry.Info) -> User | None:
        """Register a user (not implemented)."""
        from ..resolvers.user import register_user

        return await register_user(info)
