"""
API module for Gemini interactions.

Handles all communication with the Google Gemini API including:
- API key resolution
- The generateContent REST call and response parsing
- Prompt and request building
"""

from .exceptions import GeminiAPIError, MissingCredentialError

from .gemini_client import (
    GeminiClient,
    get_client,
    has_api_key,
    resolve_api_key,
    get_candidate_parts,
    get_inline_data,
    get_response_text,
)

from .prompt_builders import (
    STORYBOARD_SYSTEM_INSTRUCTION,
    CHARACTER_CHECK_PROMPT,
    build_style_transfer_prompt,
    build_scene_image_parts,
)

__all__ = [
    # Exceptions
    "GeminiAPIError",
    "MissingCredentialError",
    # Client
    "GeminiClient",
    "get_client",
    "has_api_key",
    "resolve_api_key",
    "get_candidate_parts",
    "get_inline_data",
    "get_response_text",
    # Prompt builders
    "STORYBOARD_SYSTEM_INSTRUCTION",
    "CHARACTER_CHECK_PROMPT",
    "build_style_transfer_prompt",
    "build_scene_image_parts",
]
