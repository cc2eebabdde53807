"""Domain models for logged food entries, goals and summaries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

DEFAULT_GOAL_VALUES: dict[str, float] = {
    "protein_goal": 100,
    "fiber_goal": 30,
    "carb_goal": 250,
    "sugar_goal": 36,
    "fat_goal": 70,
    "sat_fat_goal": 20,
    "calories_goal": 2000,
}


@dataclass(frozen=True)
class AuthenticatedUser:
    """User resolved from an access token."""

    id: UUID
    email: str | None = None


@dataclass(frozen=True)
class EntryDraft:
    """Values for a new calorie entry before it is stored."""

    food_name: str
    calories: int
    image_url: str | None = None
    protein: float | None = None
    fiber: float | None = None
    carbohydrates: float | None = None
    sugar: float | None = None
    fats: float | None = None
    saturated_fat: float | None = None


@dataclass(frozen=True)
class CalorieEntry:
    """A stored food entry."""

    id: UUID
    user_id: UUID
    food_name: str
    calories: int
    created_at: datetime
    updated_at: datetime | None = None
    image_url: str | None = None
    protein: float | None = None
    fiber: float | None = None
    carbohydrates: float | None = None
    sugar: float | None = None
    fats: float | None = None
    saturated_fat: float | None = None


@dataclass(frozen=True)
class NutrientGoals:
    """Daily nutrient targets for a user."""

    user_id: UUID
    id: UUID | None = None
    protein_goal: float = DEFAULT_GOAL_VALUES["protein_goal"]
    fiber_goal: float = DEFAULT_GOAL_VALUES["fiber_goal"]
    carb_goal: float = DEFAULT_GOAL_VALUES["carb_goal"]
    sugar_goal: float = DEFAULT_GOAL_VALUES["sugar_goal"]
    fat_goal: float = DEFAULT_GOAL_VALUES["fat_goal"]
    sat_fat_goal: float = DEFAULT_GOAL_VALUES["sat_fat_goal"]
    calories_goal: float = DEFAULT_GOAL_VALUES["calories_goal"]
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients across entries."""

    calories: int = 0
    protein: float = 0.0
    fiber: float = 0.0
    carbohydrates: float = 0.0
    sugar: float = 0.0
    fats: float = 0.0
    saturated_fat: float = 0.0


@dataclass(frozen=True)
class DailySummary:
    """Entries and calorie total for a single local date."""

    date: date
    total_calories: int
    entries: list[CalorieEntry] = field(default_factory=list)


@dataclass(frozen=True)
class DailyProgress:
    """Today's summary measured against the user's goals."""

    summary: DailySummary
    totals: NutrientTotals
    goals: NutrientGoals
    remaining_calories: float
    progress_percent: int


@dataclass(frozen=True)
class StoredImage:
    """Meal photo saved to object storage."""

    path: str
    public_url: str
