"""Food recognition service backed by a multimodal chat model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.errors import (
    API_KEY_NOT_CONFIGURED,
    IMAGE_URL_REQUIRED,
    ConfigurationError,
    ValidationError,
)
from calorie_tracker.domain.recognition import RecognitionRequest, RecognitionResult
from calorie_tracker.services.normalization import normalize_completion

logger = logging.getLogger(__name__)

RECOGNITION_PROMPT = """
Analyze this food image and provide:
1. The name of the food item
2. An estimated calorie count for a typical serving
3. The following nutrients for a typical serving (in grams):
   - protein
   - fiber
   - carbohydrates
   - sugar
   - fats
   - saturated fat

Please respond in JSON format:
{
  "food_name": "food item name",
  "estimated_calories": number,
  "protein": number,
  "fiber": number,
  "carbohydrates": number,
  "sugar": number,
  "fats": number,
  "saturated_fat": number,
  "confidence": number (0-1)
}

Be specific with food names and provide realistic, evidence-based estimates \
for all nutrients.
""".strip()


class RecognitionClient(Protocol):
    """Interface for a chat completion provider."""

    async def complete(self, payload: dict[str, object]) -> dict[str, object]:
        """Send one completion request and return the response envelope."""


@dataclass
class FoodRecognitionService:
    """Builds recognition requests and normalizes the model's answer.

    ``client`` is None when no API key is configured; every call then fails
    with a configuration error instead of reaching the provider.
    """

    client: RecognitionClient | None
    model: str
    max_tokens: int
    temperature: float

    async def recognize(self, image_url: str | None) -> RecognitionResult:
        """Estimate food identity and nutrition for the image at image_url."""
        request = build_request(image_url)
        if self.client is None:
            raise ConfigurationError(API_KEY_NOT_CONFIGURED)
        payload = build_completion_payload(
            request,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        envelope = await self.client.complete(payload)
        result = normalize_completion(envelope)
        logger.info(
            "Recognized %s (%d kcal, confidence %.2f)",
            result.food_name,
            result.estimated_calories,
            result.confidence,
        )
        return result


def build_request(image_url: str | None) -> RecognitionRequest:
    """Validate the image reference and pair it with the fixed prompt."""
    if not isinstance(image_url, str) or not image_url:
        raise ValidationError(IMAGE_URL_REQUIRED)
    return RecognitionRequest(image_url=image_url, prompt=RECOGNITION_PROMPT)


def build_completion_payload(
    request: RecognitionRequest,
    *,
    model: str,
    max_tokens: int,
    temperature: float,
) -> dict[str, object]:
    """Return chat completion arguments for a recognition request."""
    return {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": request.prompt},
                    {"type": "image_url", "image_url": {"url": request.image_url}},
                ],
            }
        ],
        "max_tokens": max_tokens,
        "temperature": temperature,
    }
