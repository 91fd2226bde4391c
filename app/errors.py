## API error taxonomy rendered by the exception handlers in app.main
from typing import Any


class APIError(Exception):
    """Base for errors that terminate a request with a JSON error payload."""

    status_code = 500

    def __init__(self, message: str, /, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class BadRequestError(APIError):
    status_code = 400


class MissingFieldsError(BadRequestError):
    def __init__(self, missing: list[str], message: str | None = None, **extra: Any) -> None:
        if message is None:
            message = f"Missing required fields: {' and '.join(missing)}"
        super().__init__(message, missing=missing, **extra)
        self.missing = missing


class NotFoundError(APIError):
    status_code = 404


class ConflictError(APIError):
    status_code = 409


class LLMServiceError(APIError):
    """Failure talking to the text-generation service."""


class LLMNotConfiguredError(LLMServiceError):
    """The upstream API credential is not provisioned."""

    status_code = 500

    def __init__(self, message: str = "AI service not configured") -> None:
        super().__init__(message)


class InvalidLLMResponseError(LLMServiceError):
    """The upstream call succeeded but carried no completion text."""

    status_code = 500

    def __init__(self, message: str = "Invalid AI response") -> None:
        super().__init__(message)


class LLMUnavailableError(LLMServiceError):
    """Non-success response or network failure from the text-generation API."""

    status_code = 503

    def __init__(self, message: str = "AI service unavailable", *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail
