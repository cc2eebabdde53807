"""Models for food recognition requests and results."""

import math
import sys
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

MAX_CALORIES = 5000
DEFAULT_CONFIDENCE = 0.5
NUTRIENT_FIELDS = (
    "protein",
    "fiber",
    "carbohydrates",
    "sugar",
    "fats",
    "saturated_fat",
)


@dataclass(frozen=True)
class RecognitionRequest:
    """Image reference plus the instruction sent to the model."""

    image_url: str
    prompt: str


class RecognitionResult(BaseModel):
    """Sanitized nutrition estimate for a single food image.

    Numeric fields are coerced before validation: values that are not numbers
    fall back to the field default, calories are clamped to [0, 5000] and
    rounded, confidence is clamped to [0, 1] and nutrients are floored at 0.
    """

    model_config = ConfigDict(frozen=True)

    food_name: str
    estimated_calories: int
    protein: float = 0.0
    fiber: float = 0.0
    carbohydrates: float = 0.0
    sugar: float = 0.0
    fats: float = 0.0
    saturated_fat: float = 0.0
    confidence: float = DEFAULT_CONFIDENCE

    @field_validator("food_name", mode="before")
    @classmethod
    def _stringify_food_name(cls, value: object) -> str:
        return value if isinstance(value, str) else str(value)

    @field_validator("estimated_calories", mode="before")
    @classmethod
    def _clamp_calories(cls, value: object) -> int:
        number = coerce_number(value, allow_infinite=True)
        if number is None:
            return 0
        return round_half_up(clamp(number, 0.0, MAX_CALORIES))

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value: object) -> float:
        number = coerce_number(value, allow_infinite=True)
        if number is None:
            return DEFAULT_CONFIDENCE
        return clamp(number, 0.0, 1.0)

    @field_validator(*NUTRIENT_FIELDS, mode="before")
    @classmethod
    def _floor_nutrient(cls, value: object) -> float:
        number = coerce_number(value)
        if number is None:
            return 0.0
        return max(0.0, number)


def coerce_number(value: object, *, allow_infinite: bool = False) -> float | None:
    """Return a float for numeric input, or None when it is not a number.

    Integers beyond the float range saturate at the largest float. Infinite
    floats only count as numbers when ``allow_infinite`` is set; NaN and
    numeric strings that overflow never do.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return float(clamp(value, -sys.float_info.max, sys.float_info.max))
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if math.isinf(number):
            return None
    else:
        return None
    if math.isnan(number) or (math.isinf(number) and not allow_infinite):
        return None
    return number


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed range [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)
