"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from worldle.domain.errors import CorruptPersistedStateError
from worldle.services.session_store import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for per-day game sessions."""

    client: Client
    profile_id: str

    def get_record(self, day_id: str) -> dict[str, object] | None:
        """Return the stored state for a day, if present."""
        response = (
            self.client.table("game_sessions")
            .select("day_id, state_json")
            .eq("profile_id", self.profile_id)
            .eq("day_id", day_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        state = response.data[0].get("state_json")
        if not isinstance(state, dict):
            raise CorruptPersistedStateError(f"Malformed state_json for {day_id}")
        return state

    def put_record(self, day_id: str, record: dict[str, object]) -> None:
        """Upsert the state for a day."""
        response = (
            self.client.table("game_sessions")
            .upsert(
                {
                    "profile_id": self.profile_id,
                    "day_id": day_id,
                    "state_json": record,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="profile_id,day_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save game session")
