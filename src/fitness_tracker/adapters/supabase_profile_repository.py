"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp
from fitness_tracker.domain.models import Profile
from fitness_tracker.services.users import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("id, email, created_at")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_profile(response.data[0])
        return None

    def create_profile(self, user_id: UUID, email: str) -> Profile:
        """Create a profile row and return it."""
        response = (
            self.client.table("profiles")
            .insert({"id": str(user_id), "email": email})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        id=UUID(str(row["id"])),
        email=str(row.get("email") or ""),
        created_at=parse_timestamp(row.get("created_at")),
    )
