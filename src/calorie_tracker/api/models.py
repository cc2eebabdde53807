"""Request bodies accepted by the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.domain.entries import EntryDraft


class RecognizeFoodRequest(BaseModel):
    """Body of a food recognition call."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str | None = Field(default=None, alias="imageUrl")
    file_name: str | None = Field(default=None, alias="fileName")


class CreateEntryRequest(BaseModel):
    """Body for logging a food entry."""

    food_name: str
    calories: int
    image_url: str | None = None
    protein: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    fats: float | None = Field(default=None, ge=0)
    saturated_fat: float | None = Field(default=None, ge=0)

    def to_draft(self) -> EntryDraft:
        """Convert to the domain draft."""
        return EntryDraft(**self.model_dump())


class UpdateGoalsRequest(BaseModel):
    """Body for saving nutrient goals. Omitted fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    protein_goal: float | None = None
    fiber_goal: float | None = None
    carb_goal: float | None = None
    sugar_goal: float | None = None
    fat_goal: float | None = None
    sat_fat_goal: float | None = None
    calories_goal: float | None = None
