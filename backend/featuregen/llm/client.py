import logging
from pathlib import Path
from typing import Optional

import requests

from featuregen.config import Settings
from featuregen.errors import ModelInvocationError

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = settings.gemini_base_url.rstrip("/")
        self.model = settings.gemini_model
        self.timeout = settings.llm_timeout
        self._api_key = settings.gemini_api_key
        self._http = session or requests

    def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise ModelInvocationError("GEMINI_API_KEY is not configured")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ],
        }

        logger.info("[LLM] generateContent model=%s prompt_chars=%d", self.model, len(prompt))

        try:
            response = self._http.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self._api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise ModelInvocationError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise ModelInvocationError("Gemini returned a non-JSON body") from e

        return extract_candidate_text(data)


def extract_candidate_text(data: dict) -> str:
    """
    Join the text parts of the first candidate.

    A reply blocked by safety filters has no candidates (or a candidate
    without content); both are treated as an invocation failure.
    """
    candidates = data.get("candidates") or []
    if not candidates:
        feedback = data.get("promptFeedback")
        raise ModelInvocationError(f"Gemini returned no candidates: {feedback}")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text:
        reason = candidates[0].get("finishReason", "unknown")
        raise ModelInvocationError(f"Gemini candidate has no text (finishReason={reason})")

    return text


def load_prompt(filename: str) -> str:
    """
    Load LLM prompt files shipped inside the package.
    """
    prompt_dir = Path(__file__).resolve().parent / "prompts"
    return (prompt_dir / filename).read_text(encoding="utf-8")
