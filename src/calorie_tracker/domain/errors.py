"""Error types surfaced to API callers."""

IMAGE_URL_REQUIRED = "Image URL is required"
API_KEY_NOT_CONFIGURED = "OpenAI API key not configured"
ANALYSIS_FAILED = "Failed to analyze image"
NO_ANALYSIS_RESULT = "No analysis result received"
PARSE_FAILED = "Failed to parse analysis result"
INVALID_RESULT = "Invalid analysis result format"
INTERNAL_ERROR = "Internal server error"
NOT_AUTHENTICATED = "Not authenticated"
INVALID_BODY = "Invalid request body"
INVALID_REQUEST = "Invalid request"


class TrackerError(Exception):
    """Base error carrying a short, caller-safe message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Required input is missing or malformed."""

    status_code = 400


class AuthenticationError(TrackerError):
    """The caller could not be identified."""

    status_code = 401

    def __init__(self, message: str = NOT_AUTHENTICATED) -> None:
        super().__init__(message)


class ConfigurationError(TrackerError):
    """A required setting is missing."""


class UpstreamError(TrackerError):
    """The model provider failed or returned an empty response."""


class ParseError(TrackerError):
    """No JSON object could be read from the model output."""

    def __init__(self, message: str = PARSE_FAILED) -> None:
        super().__init__(message)


class InvalidResultError(TrackerError):
    """The model output parsed but lacks the mandatory fields."""

    def __init__(self, message: str = INVALID_RESULT) -> None:
        super().__init__(message)
