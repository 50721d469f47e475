import logging
from typing import Protocol

import requests

from gpdesk.config import Settings
from gpdesk.errors import ServiceError


logger = logging.getLogger(__name__)


class TextService(Protocol):
    def generate(self, prompt: str) -> str: ...


class GeminiClient:
    def __init__(self, *, api_key: str, model: str, base_url: str, timeout_seconds: float) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            body = response.json()
        except requests.Timeout as exc:
            raise ServiceError(f"gemini request timed out after {self.timeout_seconds}s") from exc
        except requests.RequestException as exc:
            # Covers connection errors, non-2xx statuses and undecodable bodies.
            raise ServiceError(f"gemini request failed: {exc}") from exc

        text = _candidate_text(body)
        if text is None:
            logger.warning("gemini reply carried no candidate text", extra={"model": self.model})
            raise ServiceError("gemini reply carried no candidate text")
        return text


def _candidate_text(body: object) -> str | None:
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str):
        return None
    return text
