from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ... import repository
from ...database.connection import get_async_session
from ...dbmodels import Users
from ...logging import get_logger
from ..errors import NotFoundError, UnimplementedError

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User:
    """Resolve a user by ID; unlike books and authors a miss is an error."""
    async with get_async_session() as session:
        user = await repository.find_by_id(session, Users, id)
        if not user:
            raise NotFoundError("could not find user by the provided id")

        from ..types.user import user_from_model

        return user_from_model(user)


async def resolve_users(info: strawberry.Info) -> list[User]:
    async with get_async_session() as session:
        users = await repository.find(session, Users, is_deleted=False)

        from ..types.user import user_from_model

        return [user_from_model(user) for user in users]


async def register_user(info: strawberry.Info) -> User:
    # TODO: define the registration input fields and password hashing
    raise UnimplementedError("registerUser is not implemented")
