"""
Prompt builders for Gemini API requests.

Instructions, response schemas and content parts for the four gateway
operations. Request bodies use the REST (camelCase) field names.
"""

from typing import Dict, List, Optional

from ..config import SCENE_ASPECT_RATIO


STORYBOARD_SYSTEM_INSTRUCTION = """You are an expert storyboard artist and video director. Your task is to split the provided story into a highly granular sequence of scenes for a dynamic video.

CRITICAL RULE: Create a separate scene for EVERY SINGLE SENTENCE.
- Do NOT group multiple sentences into one scene.
- If a sentence is very long or complex, you may even split it into two scenes.
- The goal is to ensure the visual image changes frequently (every few seconds) to keep the viewer engaged.
- Never allow a single image to remain on screen for a long paragraph.

For each scene:
1. Extract the exact text segment (usually just one sentence).
2. Write a highly detailed, cinematic image generation prompt that visualizes that specific moment, suitable for vertical video (9:16 format), including camera angles, lighting, and mood.
3. Ensure visual consistency across prompts (e.g. if the main character is wearing a red cloak in scene 1, ensure they are described similarly in scene 2)."""

STORYBOARD_RESPONSE_SCHEMA: Dict = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "narrativeText": {
                "type": "STRING",
                "description": "The specific sentence or phrase from the original text for this scene.",
            },
            "imagePrompt": {
                "type": "STRING",
                "description": "A detailed visual description of the scene suitable for an image generation model.",
            },
        },
        "required": ["narrativeText", "imagePrompt"],
    },
}

CHARACTER_CHECK_PROMPT = (
    "Analyze this image. Does it contain a visible person, character, skeleton, "
    "or humanoid figure that serves as the main subject? "
    "Answer with JSON: {\"hasCharacter\": boolean}"
)

CHARACTER_CHECK_RESPONSE_SCHEMA: Dict = {
    "type": "OBJECT",
    "properties": {"hasCharacter": {"type": "BOOLEAN"}},
    "required": ["hasCharacter"],
}


def build_style_transfer_prompt(prompt: str) -> str:
    """Wrap a scene prompt so the model copies the look of the reference image."""
    return (
        "Adopt the artistic style, color palette, and mood of the reference image "
        f"provided above. Generate a new scene based on this description: {prompt}"
    )


def inline_data_part(mime_type: str, data: str) -> dict:
    return {"inlineData": {"mimeType": mime_type, "data": data}}


def text_part(text: str) -> dict:
    return {"text": text}


def user_content(parts: List[dict]) -> List[dict]:
    """Single-turn contents list for generateContent."""
    return [{"role": "user", "parts": parts}]


# =============================================================================
# Generation configs
# =============================================================================

def build_speech_config(voice: str) -> dict:
    """Audio-only response with a prebuilt voice."""
    return {
        "responseModalities": ["AUDIO"],
        "speechConfig": {
            "voiceConfig": {
                "prebuiltVoiceConfig": {"voiceName": voice},
            },
        },
    }


def build_storyboard_config() -> dict:
    return {
        "responseMimeType": "application/json",
        "responseSchema": STORYBOARD_RESPONSE_SCHEMA,
    }


def build_scene_image_config(aspect_ratio: str = SCENE_ASPECT_RATIO) -> dict:
    return {"imageConfig": {"aspectRatio": aspect_ratio}}


def build_character_check_config() -> dict:
    return {
        "responseMimeType": "application/json",
        "responseSchema": CHARACTER_CHECK_RESPONSE_SCHEMA,
    }


def build_scene_image_parts(
    prompt: str,
    reference: Optional[tuple] = None,
) -> List[dict]:
    """
    Build the content parts for a scene image request.

    Args:
        prompt: Scene description.
        reference: Optional (mime_type, base64_data) of a style reference image.

    Returns:
        Either [image, style-transfer text] or [plain prompt text].
    """
    if reference is None:
        return [text_part(prompt)]
    mime_type, data = reference
    return [
        inline_data_part(mime_type, data),
        text_part(build_style_transfer_prompt(prompt)),
    ]
