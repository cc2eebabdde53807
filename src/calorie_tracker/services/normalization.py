"""Turn free-form model output into a validated recognition result."""

import json
import logging
import re
from collections.abc import Mapping

from calorie_tracker.domain.errors import (
    NO_ANALYSIS_RESULT,
    InvalidResultError,
    ParseError,
    UpstreamError,
)
from calorie_tracker.domain.recognition import RecognitionResult

logger = logging.getLogger(__name__)

# Greedy: spans from the first "{" to the last "}" in the text.
_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def normalize_completion(envelope: Mapping[str, object]) -> RecognitionResult:
    """Extract, parse and sanitize the answer in a chat completion envelope."""
    content = extract_content(envelope)
    parsed = parse_analysis(content)
    return build_result(parsed)


def extract_content(envelope: Mapping[str, object]) -> str:
    """Return choices[0].message.content from a completion envelope."""
    choices = envelope.get("choices")
    first = choices[0] if isinstance(choices, list) and choices else None
    message = first.get("message") if isinstance(first, Mapping) else None
    content = message.get("content") if isinstance(message, Mapping) else None
    if not isinstance(content, str) or not content:
        raise UpstreamError(NO_ANALYSIS_RESULT)
    return content


def parse_analysis(content: str) -> object:
    """Parse the JSON object embedded in content, falling back to the whole text."""
    match = _JSON_OBJECT_PATTERN.search(content)
    candidate = match.group(0) if match else content
    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.error("Failed to parse model response: %r", content)
        raise ParseError() from exc


def build_result(parsed: object) -> RecognitionResult:
    """Check mandatory fields and build the sanitized result."""
    if not isinstance(parsed, Mapping):
        raise InvalidResultError()
    if _is_missing(parsed.get("food_name")) or _is_missing(
        parsed.get("estimated_calories")
    ):
        raise InvalidResultError()
    return RecognitionResult.model_validate(dict(parsed))


def _is_missing(value: object) -> bool:
    return value is None or value == "" or value == 0


def _reject_constant(name: str) -> float:
    raise ValueError(f"Unsupported JSON constant: {name}")
