from rest_framework import status

from core_backend.exceptions import DomainError


class AssistantError(DomainError):
    """The assistant is unavailable right now. Please try again later."""

    code = "assistant_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class AssistantNotConfigured(AssistantError):
    """The assistant is not configured. Set GEMINI_API_KEY to enable it."""

    code = "assistant_not_configured"
