# /app/services/gemini_service.py

import os
from dotenv import load_dotenv
from typing import Optional
import google.generativeai as genai
from google.generativeai.types import GenerationConfig
from google.api_core import exceptions as google_exceptions

# --- CONFIGURATION ---
load_dotenv()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
DEFAULT_TEMPERATURE = 0.8

# genai.configure() sets process-wide SDK state. The app serves a single key, so the
# SDK is reconfigured only when that key changes. Clients built with different
# explicit keys must not be used concurrently.
_configured_api_key: Optional[str] = None


class MissingCredentialError(RuntimeError):
    """Raised when no Gemini API key is available. Always fatal for a request."""


class UpstreamGenerationError(RuntimeError):
    """Raised when the Gemini API answers with a non-success status or no content."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _configure_sdk(api_key: str):
    global _configured_api_key
    if api_key != _configured_api_key:
        genai.configure(api_key=api_key)
        _configured_api_key = api_key


class GeminiTextClient:
    """
    The text-generation capability used by the content proxy. The API key is
    resolved on every call, so a deployment without GEMINI_API_KEY fails closed
    at request time instead of at import time.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = api_key
        self.model_name = model_name or GEMINI_MODEL

    def _resolve_api_key(self) -> str:
        api_key = self.api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise MissingCredentialError("Gemini API key not configured")
        return api_key

    async def generate_text(self, prompt: str, temperature: float = DEFAULT_TEMPERATURE) -> str:
        """Sends a single text prompt and returns the model's raw text answer."""
        _configure_sdk(self._resolve_api_key())
        model = genai.GenerativeModel(self.model_name)
        config = GenerationConfig(temperature=temperature)
        try:
            response = await model.generate_content_async(prompt, generation_config=config)
        except google_exceptions.GoogleAPICallError as e:
            print(f"ERROR in generate_text with Gemini API: {e}")
            status_code = int(e.code) if e.code is not None else None
            raise UpstreamGenerationError(f"Gemini API error: {status_code}", status_code=status_code) from e
        except google_exceptions.GoogleAPIError as e:
            print(f"ERROR in generate_text with Gemini API: {e}")
            raise UpstreamGenerationError(f"Gemini API error: {e}") from e

        if not response.parts:
            raise UpstreamGenerationError("Gemini API returned an empty response.")
        return response.text


# --- FastAPI dependency ---
def get_text_client() -> GeminiTextClient:
    return GeminiTextClient()
