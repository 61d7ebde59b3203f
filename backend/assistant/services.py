import logging

import requests
from django.conf import settings

from assistant.exceptions import AssistantError, AssistantNotConfigured

logger = logging.getLogger(__name__)


class AssistantService:
    """
    Chat completion through the Gemini ``generateContent`` REST endpoint.

    Each prompt is sent on its own with the shop's system instruction; no
    conversation history is kept server-side.
    """

    @staticmethod
    def endpoint(model=None):
        model = model or settings.GEMINI_MODEL
        return f"{settings.GEMINI_API_URL.rstrip('/')}/{model}:generateContent"

    @staticmethod
    def build_payload(prompt):
        return {
            "systemInstruction": {"parts": [{"text": settings.ASSISTANT_SYSTEM_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }

    @staticmethod
    def extract_text(data):
        """Concatenate the text parts of the first candidate, or return ''."""
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts).strip()

    @staticmethod
    def complete(prompt: str) -> str:
        """
        Send ``prompt`` and return the reply text.

        Raises:
            AssistantNotConfigured: no API key is set.
            AssistantError: the request failed or the reply was empty.
        """
        api_key = settings.GEMINI_API_KEY
        if not api_key:
            logger.warning("Gemini API key is not configured in settings.")
            raise AssistantNotConfigured()

        try:
            response = requests.post(
                AssistantService.endpoint(),
                params={"key": api_key},
                json=AssistantService.build_payload(prompt),
                timeout=settings.GEMINI_TIMEOUT,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"HTTP request to Gemini API failed: {e}")
            raise AssistantError(f"Failed to reach the assistant: {e}") from e
        except ValueError as e:
            logger.error(f"Gemini API returned invalid JSON: {e}")
            raise AssistantError() from e

        reply = AssistantService.extract_text(data)
        if not reply:
            reason = (data.get("promptFeedback") or {}).get("blockReason")
            logger.error(f"Gemini API returned no text (block reason: {reason})")
            raise AssistantError()

        return reply
