"""
Tests for author GraphQL resolvers
"""

import pytest
import pytest_asyncio

from bookgraph.graphql.errors import NotFoundError
from bookgraph.graphql.resolvers.author import (
    create_author,
    delete_author,
    resolve_author_books,
    resolve_author_by_id,
    resolve_authors,
    update_author,
)
from bookgraph.graphql.resolvers.book import create_book, delete_book, update_book


@pytest_asyncio.fixture
async def jane(db, mock_info):
    return await create_author(
        mock_info, first_name="Jane", last_name="Doe", email="jane@x.com", age=40
    )


class TestCreateAuthor:
    @pytest.mark.asyncio
    async def test_new_author_has_no_books(self, mock_info, jane):
        assert jane.book_ids == []
        assert jane.is_deleted is False
        assert await resolve_author_books(jane, mock_info) == []

    @pytest.mark.asyncio
    async def test_appears_in_listing(self, mock_info, jane):
        authors = await resolve_authors(mock_info)
        assert [a.id for a in authors] == [jane.id]


class TestResolveAuthorById:
    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, mock_info, db):
        assert await resolve_author_by_id(mock_info, "missing") is None

    @pytest.mark.asyncio
    async def test_returns_soft_deleted_author(self, mock_info, jane):
        await delete_author(mock_info, jane.id)

        found = await resolve_author_by_id(mock_info, jane.id)

        assert found is not None
        assert found.is_deleted is True


class TestUpdateAuthor:
    @pytest.mark.asyncio
    async def test_partial_update(self, mock_info, jane):
        updated = await update_author(mock_info, jane.id, email="jane@doe.org", age=41)

        assert updated is not None
        assert updated.first_name == "Jane"
        assert updated.email == "jane@doe.org"
        assert updated.age == 41

    @pytest.mark.asyncio
    async def test_unknown_author_returns_none(self, mock_info, db):
        assert await update_author(mock_info, "missing", age=1) is None


class TestDeleteAuthor:
    @pytest.mark.asyncio
    async def test_toggle_twice_restores_visibility(self, mock_info, jane):
        deleted = await delete_author(mock_info, jane.id)
        assert deleted.is_deleted is True
        assert jane.id not in [a.id for a in await resolve_authors(mock_info)]

        restored = await delete_author(mock_info, jane.id)
        assert restored.is_deleted is False
        assert jane.id in [a.id for a in await resolve_authors(mock_info)]

    @pytest.mark.asyncio
    async def test_unknown_author_fails(self, mock_info, db):
        with pytest.raises(NotFoundError, match="Error deleting author: Author not found"):
            await delete_author(mock_info, "missing")


class TestResolveAuthorBooks:
    @pytest.mark.asyncio
    async def test_reads_books_not_cached_list(self, mock_info, jane):
        other = await create_author(
            mock_info, first_name="John", last_name="Roe", email="john@x.com", age=50
        )
        dune = await create_book(
            mock_info, title="Dune", pages=412, author=jane.id, year_of_publication=None
        )
        foo = await create_book(
            mock_info, title="Foo", pages=100, author=jane.id, year_of_publication=None
        )

        await update_book(mock_info, foo.id, author=other.id)

        refreshed = await resolve_author_by_id(mock_info, jane.id)
        assert refreshed is not None
        # The cached list drifted; the relation did not
        assert refreshed.book_ids == [foo.id, dune.id]
        assert [b.id for b in await resolve_author_books(refreshed, mock_info)] == [dune.id]

        moved = await resolve_author_by_id(mock_info, other.id)
        assert moved is not None
        assert moved.book_ids == []
        assert [b.id for b in await resolve_author_books(moved, mock_info)] == [foo.id]

    @pytest.mark.asyncio
    async def test_includes_soft_deleted_books(self, mock_info, jane):
        dune = await create_book(
            mock_info, title="Dune", pages=412, author=jane.id, year_of_publication=None
        )
        await delete_book(mock_info, dune.id)

        books = await resolve_author_books(jane, mock_info)

        assert [(b.id, b.is_deleted) for b in books] == [(dune.id, True)]
