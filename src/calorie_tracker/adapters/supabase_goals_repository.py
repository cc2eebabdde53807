"""Supabase repository for nutrient goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.entries import DEFAULT_GOAL_VALUES, NutrientGoals
from calorie_tracker.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for nutrient goals."""

    client: Client

    def get_goals(self, user_id: UUID) -> NutrientGoals | None:
        """Return the goals row for a user."""
        response = (
            self.client.table("nutrient_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_goals(self, user_id: UUID, values: dict[str, float]) -> NutrientGoals:
        """Insert a goals row."""
        response = (
            self.client.table("nutrient_goals")
            .insert({**values, "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create nutrient goals")
        return _parse_row(response.data[0])

    def update_goals(self, goals_id: UUID, values: dict[str, float]) -> NutrientGoals:
        """Update a goals row by id."""
        response = (
            self.client.table("nutrient_goals")
            .update({**values, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(goals_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update nutrient goals")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> NutrientGoals:
    goals = {
        name: float(row[name]) if row.get(name) is not None else default
        for name, default in DEFAULT_GOAL_VALUES.items()
    }
    return NutrientGoals(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
        **goals,
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
