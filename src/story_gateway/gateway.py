"""
Generation gateway: speech, storyboard, scene image and character check.

Each operation is one Gemini round trip on a client built from the resolved
API key. Speech, storyboard and scene image log failures and re-raise them.
The character check fails open: it returns CHARACTER_CHECK_DEFAULT when no
key is configured or when anything goes wrong.
"""

import asyncio
import json
import re
from typing import List, Optional

from . import config
from .api import gemini_client
from .api.exceptions import GeminiAPIError
from .api.gemini_client import get_candidate_parts, get_inline_data, get_response_text
from .api.prompt_builders import (
    CHARACTER_CHECK_PROMPT,
    STORYBOARD_SYSTEM_INSTRUCTION,
    build_character_check_config,
    build_scene_image_config,
    build_scene_image_parts,
    build_speech_config,
    build_storyboard_config,
    inline_data_part,
    text_part,
    user_content,
)
from .core.models import StoryboardSegment
from .logging_utils import (
    log_exception,
    log_generation_complete,
    log_generation_start,
    log_warning,
)
from .processing.image_utils import build_data_uri, parse_data_uri

_CODE_FENCE_RE = re.compile(r"```(?:json)?")


def _require_text(value: str, name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name!r}")


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers anywhere in text and trim whitespace."""
    return _CODE_FENCE_RE.sub("", text).strip()


# =============================================================================
# Speech
# =============================================================================

def synthesize_speech(
    text: str,
    voice: str,
    style_prompt: str,
    api_key: Optional[str] = None,
) -> Optional[str]:
    """
    Synthesize speech for text with a prebuilt voice.

    Args:
        text: Text to speak.
        voice: One of config.VOICE_NAMES.
        style_prompt: Delivery guidance, sent verbatim as the system instruction.
        api_key: Optional per-call key (falls back to config.ENV_API_KEY).

    Returns:
        Base64 PCM audio from the first part of the first candidate,
        or None if the model returned no audio.

    Raises:
        MissingCredentialError: If no API key is available.
        ValueError: On empty text or an unsupported voice.
    """
    client = gemini_client.get_client(api_key)
    _require_text(text, "text")
    if voice not in config.VOICE_NAMES:
        raise ValueError(f"Unsupported voice {voice!r}; expected one of {config.VOICE_NAMES}")

    log_generation_start("speech")
    try:
        data = client.generate_content(
            config.SPEECH_MODEL,
            user_content([text_part(text)]),
            system_instruction=style_prompt,
            generation_config=build_speech_config(voice),
            context="speech",
        )
    except Exception as e:
        log_generation_complete("speech", False, str(e))
        raise

    parts = get_candidate_parts(data)
    blob = get_inline_data(parts[0]) if parts else None
    if blob is None:
        log_warning("Speech response contained no audio")
        return None

    log_generation_complete("speech", True, f"{len(blob['data'])} base64 chars")
    return blob["data"]


# =============================================================================
# Storyboard
# =============================================================================

def decompose_storyboard(full_text: str, api_key: Optional[str] = None) -> List[StoryboardSegment]:
    """
    Split a story into one scene per sentence, each with an image prompt.

    Args:
        full_text: The whole narrative.
        api_key: Optional per-call key (falls back to config.ENV_API_KEY).

    Returns:
        Scenes in narrative order.

    Raises:
        MissingCredentialError: If no API key is available.
        ValueError: On empty text.
        json.JSONDecodeError: If the response is not valid JSON once code
            fences are removed.
        GeminiAPIError: On an API error, or if the JSON is not an array.
    """
    client = gemini_client.get_client(api_key)
    _require_text(full_text, "full_text")

    log_generation_start("storyboard")
    try:
        data = client.generate_content(
            config.STORYBOARD_MODEL,
            user_content([text_part(full_text)]),
            system_instruction=STORYBOARD_SYSTEM_INSTRUCTION,
            generation_config=build_storyboard_config(),
            context="storyboard",
        )
        raw = get_response_text(data) or "[]"
        items = json.loads(strip_code_fences(raw))
        if not isinstance(items, list):
            raise GeminiAPIError(
                f"Storyboard response is not a JSON array (got {type(items).__name__})"
            )
        segments = [StoryboardSegment.from_dict(item) for item in items]
    except Exception as e:
        log_generation_complete("storyboard", False, str(e))
        raise

    log_generation_complete("storyboard", True, f"{len(segments)} scenes")
    return segments


# =============================================================================
# Scene Images
# =============================================================================

def generate_scene_image(
    prompt: str,
    reference_image: Optional[str] = None,
    api_key: Optional[str] = None,
) -> Optional[str]:
    """
    Generate a 9:16 scene image, optionally in the style of a reference image.

    Args:
        prompt: Scene description.
        reference_image: Optional data-URI whose style, palette and mood
            the new scene should adopt.
        api_key: Optional per-call key (falls back to config.ENV_API_KEY).

    Returns:
        The first generated image as a data-URI, or None if the response
        contained no image.

    Raises:
        MissingCredentialError: If no API key is available.
        ValueError: On an empty prompt.
    """
    client = gemini_client.get_client(api_key)
    _require_text(prompt, "prompt")

    reference = parse_data_uri(reference_image) if reference_image else None
    parts = build_scene_image_parts(prompt, reference)

    log_generation_start("scene_image")
    try:
        data = client.generate_content(
            config.IMAGE_MODEL,
            user_content(parts),
            generation_config=build_scene_image_config(),
            context="scene_image",
        )
    except Exception as e:
        log_generation_complete("scene_image", False, str(e))
        raise

    for part in get_candidate_parts(data):
        blob = get_inline_data(part)
        if blob is not None:
            log_generation_complete("scene_image", True, blob["mimeType"] or config.DEFAULT_IMAGE_MIME)
            return build_data_uri(blob["mimeType"], blob["data"])

    log_warning("Scene image response contained no image")
    return None


# =============================================================================
# Character Check
# =============================================================================

def has_character(image_data_uri: str, api_key: Optional[str] = None) -> bool:
    """
    Check whether an image shows a person, character, skeleton or humanoid
    figure as its main subject.

    Never raises. Returns CHARACTER_CHECK_DEFAULT (True) without calling the
    API when no key is configured, on an empty response, and on any error.
    """
    if not gemini_client.has_api_key(api_key):
        log_warning("Character check skipped: no API key configured")
        return config.CHARACTER_CHECK_DEFAULT

    try:
        client = gemini_client.get_client(api_key)
        mime_type, payload = parse_data_uri(image_data_uri)
        data = client.generate_content(
            config.CHARACTER_CHECK_MODEL,
            user_content([inline_data_part(mime_type, payload), text_part(CHARACTER_CHECK_PROMPT)]),
            generation_config=build_character_check_config(),
            context="character_check",
        )
        text = get_response_text(data)
        if not text:
            return config.CHARACTER_CHECK_DEFAULT
        result = json.loads(text, parse_constant=_reject_constant)
        if result is None:
            return config.CHARACTER_CHECK_DEFAULT
        if not isinstance(result, dict):
            return False
        return bool(result.get("hasCharacter"))
    except Exception:
        log_exception("Error analyzing image for character content")
        return config.CHARACTER_CHECK_DEFAULT


# =============================================================================
# Async variants
# =============================================================================

async def asynthesize_speech(
    text: str,
    voice: str,
    style_prompt: str,
    api_key: Optional[str] = None,
) -> Optional[str]:
    """Coroutine version of synthesize_speech(), run in a worker thread."""
    return await asyncio.to_thread(synthesize_speech, text, voice, style_prompt, api_key)


async def adecompose_storyboard(full_text: str, api_key: Optional[str] = None) -> List[StoryboardSegment]:
    """Coroutine version of decompose_storyboard(), run in a worker thread."""
    return await asyncio.to_thread(decompose_storyboard, full_text, api_key)


async def agenerate_scene_image(
    prompt: str,
    reference_image: Optional[str] = None,
    api_key: Optional[str] = None,
) -> Optional[str]:
    """Coroutine version of generate_scene_image(), run in a worker thread."""
    return await asyncio.to_thread(generate_scene_image, prompt, reference_image, api_key)


async def ahas_character(image_data_uri: str, api_key: Optional[str] = None) -> bool:
    """Coroutine version of has_character(), run in a worker thread."""
    return await asyncio.to_thread(has_character, image_data_uri, api_key)
