"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Users


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    first_name: str | None
    last_name: str | None
    email: str | None
    password: str | None
    profile_picture: str | None
    phone: str | None


def user_from_model(user: "Users") -> User:
    return User(
        id=strawberry.ID(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        password=user.password,
        profile_picture=user.profile_picture,
        phone=user.phone,
    )
