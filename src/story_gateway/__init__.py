"""
Story Gateway

Thin client for Google Gemini that turns stories into narrated, illustrated
vertical-video material.

Package Structure:
    api/        - Gemini API client, prompts and exceptions
    core/       - Data models
    processing/ - Data-URI image and PCM audio conversion
    gateway.py  - The four generation operations
"""

__version__ = "1.0.0"

import logging

# Library callers configure logging themselves; the CLI calls setup_logging().
logging.getLogger("story_gateway").addHandler(logging.NullHandler())

from .api.exceptions import GeminiAPIError, MissingCredentialError
from .core.models import StoryboardSegment
from .gateway import (
    synthesize_speech,
    decompose_storyboard,
    generate_scene_image,
    has_character,
    asynthesize_speech,
    adecompose_storyboard,
    agenerate_scene_image,
    ahas_character,
)
from .processing.image_utils import parse_data_uri, build_data_uri

__all__ = [
    "__version__",
    # Operations
    "synthesize_speech",
    "decompose_storyboard",
    "generate_scene_image",
    "has_character",
    "asynthesize_speech",
    "adecompose_storyboard",
    "agenerate_scene_image",
    "ahas_character",
    # Types
    "StoryboardSegment",
    "GeminiAPIError",
    "MissingCredentialError",
    # Data-URI helpers
    "parse_data_uri",
    "build_data_uri",
]
