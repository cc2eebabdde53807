"""Calorie entry logging and daily summaries."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.entries import (
    CalorieEntry,
    DailyProgress,
    DailySummary,
    EntryDraft,
    NutrientTotals,
)
from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.services.goals import GoalsService

HISTORY_DAYS = 30


class EntryRepository(Protocol):
    """Persistence interface for calorie entries."""

    def create_entry(self, user_id: UUID, draft: EntryDraft) -> CalorieEntry:
        """Insert an entry and return the stored row."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[CalorieEntry]:
        """Return entries created within [start, end), newest first."""


@dataclass
class EntryService:
    """Service for logging food and summarizing intake by local day."""

    repository: EntryRepository
    goals_service: GoalsService

    def add_entry(self, user_id: UUID, draft: EntryDraft) -> CalorieEntry:
        """Validate and store a new entry."""
        if not draft.food_name or not draft.food_name.strip():
            raise ValidationError("Food name is required")
        if draft.calories <= 0:
            raise ValidationError("Calories must be greater than zero")
        return self.repository.create_entry(user_id, draft)

    def get_today(self, user_id: UUID, timezone_name: str) -> DailySummary:
        """Return today's entries and calorie total in the user's timezone."""
        tz = ZoneInfo(timezone_name)
        start = datetime.now(tz=tz).replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        entries = self.repository.list_entries(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return _summarize(start.date(), entries)

    def get_daily_progress(self, user_id: UUID, timezone_name: str) -> DailyProgress:
        """Return today's summary measured against the user's goals."""
        summary = self.get_today(user_id, timezone_name)
        goals = self.goals_service.get_goals(user_id)
        totals = sum_nutrients(summary.entries)
        calorie_goal = goals.calories_goal
        if calorie_goal > 0:
            progress = min(100, round(summary.total_calories / calorie_goal * 100))
        else:
            progress = 100 if summary.total_calories else 0
        return DailyProgress(
            summary=summary,
            totals=totals,
            goals=goals,
            remaining_calories=max(0, calorie_goal - summary.total_calories),
            progress_percent=progress,
        )

    def get_history(
        self, user_id: UUID, timezone_name: str, days: int = HISTORY_DAYS
    ) -> list[DailySummary]:
        """Return per-day summaries for the last ``days`` days, newest first."""
        tz = ZoneInfo(timezone_name)
        now = datetime.now(tz=UTC)
        entries = self.repository.list_entries(user_id, now - timedelta(days=days), now)
        grouped: dict[date, list[CalorieEntry]] = defaultdict(list)
        for entry in entries:
            grouped[entry.created_at.astimezone(tz).date()].append(entry)
        return [
            _summarize(day, grouped[day]) for day in sorted(grouped, reverse=True)
        ]


def sum_nutrients(entries: list[CalorieEntry]) -> NutrientTotals:
    """Add up calories and nutrients, treating unknown amounts as zero."""
    return NutrientTotals(
        calories=sum(entry.calories for entry in entries),
        protein=sum(entry.protein or 0.0 for entry in entries),
        fiber=sum(entry.fiber or 0.0 for entry in entries),
        carbohydrates=sum(entry.carbohydrates or 0.0 for entry in entries),
        sugar=sum(entry.sugar or 0.0 for entry in entries),
        fats=sum(entry.fats or 0.0 for entry in entries),
        saturated_fat=sum(entry.saturated_fat or 0.0 for entry in entries),
    )


def _summarize(day: date, entries: list[CalorieEntry]) -> DailySummary:
    ordered = sorted(entries, key=lambda entry: entry.created_at, reverse=True)
    return DailySummary(
        date=day,
        total_calories=sum(entry.calories for entry in ordered),
        entries=ordered,
    )
