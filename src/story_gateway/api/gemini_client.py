"""
Gemini API client for the generation gateway.

Handles API key resolution, the generateContent REST call, and pulling
text and inline data out of Gemini JSON responses.
"""

import json
from typing import Any, Dict, List, Optional

import requests

from .. import config
from ..logging_utils import log_api_call, log_debug
from .exceptions import GeminiAPIError, MissingCredentialError


# =============================================================================
# API Key Resolution
# =============================================================================

def has_api_key(api_key: Optional[str] = None, fallback: Optional[str] = None) -> bool:
    """Return True if either the per-call key or the fallback key is usable."""
    if fallback is None:
        fallback = config.ENV_API_KEY
    return bool(api_key) or bool(fallback)


def resolve_api_key(api_key: Optional[str] = None, fallback: Optional[str] = None) -> str:
    """
    Pick the API key for a call.

    Args:
        api_key: Key supplied by the caller for this call. Used if non-empty.
        fallback: Process-wide key. Defaults to config.ENV_API_KEY.

    Returns:
        The key to authenticate with.

    Raises:
        MissingCredentialError: If neither key is available.
    """
    if api_key:
        return api_key
    if fallback is None:
        fallback = config.ENV_API_KEY
    if fallback:
        return fallback
    raise MissingCredentialError(
        "API key is missing. Pass api_key or set API_KEY / GEMINI_API_KEY "
        f"(or save one to {config.CONFIG_PATH})."
    )


# =============================================================================
# Client
# =============================================================================

class GeminiClient:
    """
    Minimal client for the Gemini generateContent endpoint.

    Built fresh for every gateway call from the resolved key. Sends exactly
    one request per generate_content() call; no retries and no timeout of
    its own.
    """

    def __init__(self, api_key: str, base_url: str = config.GEMINI_API_BASE):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def endpoint(self, model: str) -> str:
        return f"{self.base_url}/{model}:generateContent"

    def generate_content(
        self,
        model: str,
        contents: List[dict],
        system_instruction: Optional[str] = None,
        generation_config: Optional[dict] = None,
        context: str = "generate_content",
    ) -> Dict[str, Any]:
        """
        Call generateContent and return the parsed JSON response.

        Args:
            model: Gemini model name.
            contents: List of content dicts ({"role": ..., "parts": [...]}).
            system_instruction: Optional system-level instruction text.
            generation_config: Optional generationConfig dict.
            context: Operation label for logs and error messages.

        Returns:
            Parsed JSON response body.

        Raises:
            GeminiAPIError: If the API answers with a non-2xx status.
            requests.RequestException: Transport failures, unchanged.
        """
        payload: Dict[str, Any] = {"contents": contents}
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
        if generation_config:
            payload["generationConfig"] = generation_config

        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}

        log_debug(f"Gemini API call starting: {context} ({model})")
        response = requests.post(
            self.endpoint(model),
            headers=headers,
            data=json.dumps(payload),
        )

        if not response.ok:
            log_api_call(context, False, f"HTTP {response.status_code}: {response.text[:200]}")
            raise GeminiAPIError(
                f"Gemini API error {response.status_code} ({context}): {response.text[:200]}",
                status_code=response.status_code,
                response_text=response.text[:2000],
            )

        data = response.json()
        finish_reason = _first_candidate(data).get("finishReason")
        if finish_reason and finish_reason != "STOP":
            log_api_call(context, True, f"finishReason={finish_reason}")
        else:
            log_api_call(context, True)
        return data


def get_client(api_key: Optional[str] = None) -> GeminiClient:
    """Resolve the API key and build a client for a single call."""
    return GeminiClient(resolve_api_key(api_key))


# =============================================================================
# Response Helpers
# =============================================================================

def _first_candidate(data: Dict[str, Any]) -> Dict[str, Any]:
    candidates = data.get("candidates") or []
    return candidates[0] if candidates else {}


def get_candidate_parts(data: Dict[str, Any]) -> List[dict]:
    """Return the content parts of the first candidate (empty list if none)."""
    content = _first_candidate(data).get("content") or {}
    return content.get("parts") or []


def get_inline_data(part: dict) -> Optional[dict]:
    """
    Return the inline data blob of a part if it carries any data.

    Handles both 'inlineData' and 'inline_data' field naming, and
    normalizes the MIME type key to 'mimeType'.
    """
    blob = part.get("inlineData") or part.get("inline_data")
    if not blob or not blob.get("data"):
        return None
    return {
        "data": blob["data"],
        "mimeType": blob.get("mimeType") or blob.get("mime_type"),
    }


def get_response_text(data: Dict[str, Any]) -> Optional[str]:
    """
    Concatenate the text parts of the first candidate.

    Returns:
        The response text, or None if the candidate has no text parts.
    """
    texts = [part["text"] for part in get_candidate_parts(data) if part.get("text")]
    if not texts:
        return None
    return "".join(texts)
