"""OpenAI Chat Completions client for food recognition."""

import logging
from dataclasses import dataclass

from openai import APIError, APIStatusError, AsyncOpenAI

from calorie_tracker.domain.errors import ANALYSIS_FAILED, UpstreamError
from calorie_tracker.services.recognition import RecognitionClient

logger = logging.getLogger(__name__)


@dataclass
class OpenAIRecognitionClient(RecognitionClient):
    """Recognition client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIRecognitionClient":
        """Create a client that sends each request exactly once."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def complete(self, payload: dict[str, object]) -> dict[str, object]:
        """Call the chat completions endpoint and return the raw envelope."""
        try:
            response = await self.client.chat.completions.create(**payload)
        except APIStatusError as exc:
            logger.error("OpenAI API error (%s): %s", exc.status_code, exc.body)
            raise UpstreamError(ANALYSIS_FAILED) from exc
        except APIError as exc:
            logger.error("OpenAI request failed: %s", exc)
            raise UpstreamError(ANALYSIS_FAILED) from exc
        return response.model_dump()
