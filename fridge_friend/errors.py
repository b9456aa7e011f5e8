from __future__ import annotations


class RecipeServiceError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(RecipeServiceError):
    status_code = 400
    message = "No ingredients provided"


class RateLimitError(RecipeServiceError):
    status_code = 429
    message = "Too many requests. Please try again in a minute."

    def __init__(self, retry_after: int, message: str | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class ConfigurationError(RecipeServiceError):
    status_code = 500
    message = "GROQ_API_KEY not configured"


class UpstreamError(RecipeServiceError):
    status_code = 500
    message = "Failed to generate recipe"


class NetworkError(RecipeServiceError):
    status_code = 500
    message = "Failed to generate recipe"


class ParseError(RecipeServiceError):
    status_code = 500
    message = "Failed to parse recipe"
