"""Nutrient goal management."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.entries import DEFAULT_GOAL_VALUES, NutrientGoals
from calorie_tracker.domain.errors import ValidationError


class GoalsRepository(Protocol):
    """Persistence interface for nutrient goals."""

    def get_goals(self, user_id: UUID) -> NutrientGoals | None:
        """Return the stored goals for a user, if any."""

    def create_goals(self, user_id: UUID, values: dict[str, float]) -> NutrientGoals:
        """Insert a goals row and return it."""

    def update_goals(self, goals_id: UUID, values: dict[str, float]) -> NutrientGoals:
        """Update an existing goals row and return it."""


@dataclass
class GoalsService:
    """Service for reading and saving daily nutrient goals."""

    repository: GoalsRepository

    def get_goals(self, user_id: UUID) -> NutrientGoals:
        """Return stored goals or the defaults when none are saved."""
        return self.repository.get_goals(user_id) or NutrientGoals(user_id=user_id)

    def save_goals(
        self, user_id: UUID, values: dict[str, float | None]
    ) -> NutrientGoals:
        """Update the user's goals, creating the row from defaults if needed.

        ``PUT /api/goals`` already rejects unknown fields in its request model;
        the field check here covers callers that use the service directly.
        """
        provided = {key: value for key, value in values.items() if value is not None}
        unknown = set(provided) - set(DEFAULT_GOAL_VALUES)
        if unknown:
            raise ValidationError(f"Unknown goal fields: {', '.join(sorted(unknown))}")
        if any(value < 0 for value in provided.values()):
            raise ValidationError("Goals must be non-negative")

        existing = self.repository.get_goals(user_id)
        if existing and existing.id:
            return self.repository.update_goals(existing.id, provided)
        return self.repository.create_goals(
            user_id, {**DEFAULT_GOAL_VALUES, **provided}
        )
