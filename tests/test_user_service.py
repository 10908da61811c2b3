"""Tests for user profile and authentication services."""

from uuid import uuid4

import pytest

from fitness_tracker.domain.errors import ValidationError
from fitness_tracker.domain.models import AuthContext, Profile
from fitness_tracker.services.auth import AuthService
from fitness_tracker.services.users import UserService
from tests.conftest import ACCESS_TOKEN, FakeAuthClient, InMemoryProfileRepository


def test_ensure_profile_creates_missing_profile(user: AuthContext) -> None:
    repository = InMemoryProfileRepository()
    service = UserService(repository)

    profile = service.ensure_profile(user)

    assert profile.id == user.user_id
    assert profile.email == "lifter@example.com"
    assert user.user_id in repository.profiles


def test_ensure_profile_returns_existing_profile(user: AuthContext) -> None:
    existing = Profile(id=user.user_id, email="old@example.com")
    repository = InMemoryProfileRepository(profiles={user.user_id: existing})

    assert UserService(repository).ensure_profile(user) is existing


def test_authenticate_resolves_known_token(
    auth_client: FakeAuthClient, user: AuthContext
) -> None:
    service = AuthService(auth_client)

    assert service.authenticate(f" {ACCESS_TOKEN} ") == user
    assert service.authenticate("unknown") is None
    assert service.authenticate("   ") is None


def test_change_password_updates_credentials(
    auth_client: FakeAuthClient, user: AuthContext
) -> None:
    service = AuthService(auth_client)

    service.change_password(user, "hunter22", "hunter22")

    assert auth_client.passwords == {user.user_id: "hunter22"}


@pytest.mark.parametrize(
    ("new_password", "confirm_password", "message"),
    [
        ("hunter22", "hunter23", "New passwords do not match"),
        ("abc", "abc", "New password must be at least 6 characters long"),
    ],
)
def test_change_password_rejects_invalid_input(
    new_password: str, confirm_password: str, message: str
) -> None:
    auth_client = FakeAuthClient()
    context = AuthContext(user_id=uuid4(), email=None, access_token=ACCESS_TOKEN)

    with pytest.raises(ValidationError, match=message):
        AuthService(auth_client).change_password(
            context, new_password, confirm_password
        )
    assert auth_client.passwords == {}
