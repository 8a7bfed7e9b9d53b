#!/usr/bin/env python3
"""
config.py

Global constants, model names and API key storage for the generation gateway.
"""

import json
import os
from pathlib import Path
from typing import List

# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION INFO
# ═══════════════════════════════════════════════════════════════════════════════
APP_NAME = "Story Gateway"
APP_VERSION = "1.0.0"

# Path for the optional JSON config file (stores the API key)
CONFIG_PATH = Path.home() / ".story_gateway_config.json"

# ═══════════════════════════════════════════════════════════════════════════════
# GEMINI API
# ═══════════════════════════════════════════════════════════════════════════════
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

SPEECH_MODEL = "gemini-2.5-flash-preview-tts"
STORYBOARD_MODEL = "gemini-2.5-flash"
IMAGE_MODEL = "gemini-2.5-flash-image"
CHARACTER_CHECK_MODEL = "gemini-2.5-flash"

# Every prebuilt voice of the Gemini TTS models; speech synthesis accepts only these
VOICE_NAMES: List[str] = [
    "Zephyr", "Puck", "Charon", "Kore", "Fenrir", "Leda",
    "Orus", "Aoede", "Callirrhoe", "Autonoe", "Enceladus", "Iapetus",
    "Umbriel", "Algieba", "Despina", "Erinome", "Algenib", "Rasalgethi",
    "Laomedeia", "Achernar", "Alnilam", "Schedar", "Gacrux", "Pulcherrima",
    "Achird", "Zubenelgenubi", "Vindemiatrix", "Sadachbia", "Sadaltager", "Sulafat",
]
DEFAULT_VOICE = "Kore"

# Vertical video framing for every generated scene
SCENE_ASPECT_RATIO = "9:16"
DEFAULT_IMAGE_MIME = "image/png"

# TTS output: raw 16-bit mono PCM
SPEECH_SAMPLE_RATE = 24000
SPEECH_CHANNELS = 1
SPEECH_SAMPLE_WIDTH = 2

# Result of the character check whenever it cannot give a real answer
# (no key, empty response, or any error). Never blocks a generation chain.
CHARACTER_CHECK_DEFAULT = True


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIG FILE
# ═══════════════════════════════════════════════════════════════════════════════

def load_config() -> dict:
    """
    Load configuration from CONFIG_PATH if present.

    Returns:
        Dictionary containing configuration, or empty dict if not found
        or unreadable.
    """
    if CONFIG_PATH.is_file():
        try:
            with CONFIG_PATH.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (OSError, ValueError):
            return {}
    return {}


def save_config(config: dict) -> None:
    """
    Save configuration dictionary to CONFIG_PATH.

    Sets file permissions to 0o600 since the file holds an API key.
    """
    CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    try:
        os.chmod(CONFIG_PATH, 0o600)
    except OSError:
        pass  # Permissions may not be supported on all platforms


def _capture_fallback_api_key() -> str:
    """Return the process-wide fallback key: env vars first, then config file."""
    for var in ("API_KEY", "GEMINI_API_KEY"):
        value = os.environ.get(var)
        if value:
            return value
    return str(load_config().get("api_key") or "")


# Read once at process start
ENV_API_KEY = _capture_fallback_api_key()
