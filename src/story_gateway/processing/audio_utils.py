"""
Audio helpers for synthesized speech.

The TTS model returns base64 raw PCM; these wrap it in a WAV container.
"""

import base64
import wave
from io import BytesIO
from pathlib import Path

from ..config import SPEECH_CHANNELS, SPEECH_SAMPLE_RATE, SPEECH_SAMPLE_WIDTH


def pcm_to_wav_bytes(
    audio_b64: str,
    sample_rate: int = SPEECH_SAMPLE_RATE,
    channels: int = SPEECH_CHANNELS,
    sample_width: int = SPEECH_SAMPLE_WIDTH,
) -> bytes:
    """
    Decode base64 PCM audio and return it as WAV file bytes.

    Args:
        audio_b64: Base64 PCM payload from synthesize_speech().
        sample_rate: Samples per second.
        channels: Number of interleaved channels.
        sample_width: Bytes per sample.
    """
    pcm = base64.b64decode(audio_b64)
    buffer = BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(channels)
        wav.setsampwidth(sample_width)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm)
    return buffer.getvalue()


def save_speech_wav(audio_b64: str, dest: Path) -> Path:
    """Write base64 PCM speech to dest as a WAV file and return the path."""
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(pcm_to_wav_bytes(audio_b64))
    return dest
