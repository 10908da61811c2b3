"""Domain models for users and authentication."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AuthContext:
    """The authenticated caller, passed explicitly to services."""

    user_id: UUID
    email: str | None
    access_token: str


@dataclass(frozen=True)
class Profile:
    """Represents a user profile stored in the database."""

    id: UUID
    email: str
    created_at: datetime | None = None
