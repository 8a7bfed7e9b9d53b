"""
Data models for the generation gateway.

Storyboard scenes are plain dataclasses; the wire format uses camelCase keys.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class StoryboardSegment:
    """
    One scene of a storyboard.

    Attributes:
        narrative_text: The sentence (or phrase) of the story this scene shows.
        image_prompt: Cinematic 9:16 image prompt for the scene.
    """
    narrative_text: str = ""
    image_prompt: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoryboardSegment":
        return cls(
            narrative_text=data.get("narrativeText", ""),
            image_prompt=data.get("imagePrompt", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"narrativeText": self.narrative_text, "imagePrompt": self.image_prompt}
