"""
Processing module for payload conversion.

Handles data-URI images and PCM speech audio.
"""

from .image_utils import (
    parse_data_uri,
    build_data_uri,
    load_image_as_data_uri,
    save_data_uri_image,
)

from .audio_utils import (
    pcm_to_wav_bytes,
    save_speech_wav,
)

__all__ = [
    # Image utilities
    "parse_data_uri",
    "build_data_uri",
    "load_image_as_data_uri",
    "save_data_uri_image",
    # Audio utilities
    "pcm_to_wav_bytes",
    "save_speech_wav",
]
