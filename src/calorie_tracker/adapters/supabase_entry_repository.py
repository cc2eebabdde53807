"""Supabase repository for calorie entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.entries import CalorieEntry, EntryDraft
from calorie_tracker.domain.recognition import NUTRIENT_FIELDS
from calorie_tracker.services.entries import EntryRepository

_COLUMNS = (
    "id, user_id, food_name, calories, image_url, created_at, updated_at, "
    + ", ".join(NUTRIENT_FIELDS)
)


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for calorie entries."""

    client: Client

    def create_entry(self, user_id: UUID, draft: EntryDraft) -> CalorieEntry:
        """Insert an entry row and return it."""
        payload: dict[str, object] = {
            "user_id": str(user_id),
            "food_name": draft.food_name,
            "calories": draft.calories,
            "image_url": draft.image_url,
        }
        for name in NUTRIENT_FIELDS:
            value = getattr(draft, name)
            if value is not None:
                payload[name] = value
        response = self.client.table("calorie_entries").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create calorie entry")
        return _parse_row(response.data[0])

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[CalorieEntry]:
        """Return entries created in the time range, newest first."""
        response = (
            self.client.table("calorie_entries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> CalorieEntry:
    nutrients = {
        name: float(row[name]) if row.get(name) is not None else None
        for name in NUTRIENT_FIELDS
    }
    return CalorieEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_name=str(row.get("food_name", "")),
        calories=int(row.get("calories") or 0),
        created_at=_parse_timestamp(row.get("created_at")) or datetime.now(tz=UTC),
        updated_at=_parse_timestamp(row.get("updated_at")),
        image_url=row.get("image_url"),
        **nutrients,
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if not isinstance(raw, str) or not raw:
        return None
    parsed = datetime.fromisoformat(raw)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
