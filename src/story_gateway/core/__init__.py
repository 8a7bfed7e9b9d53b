"""
Core data models, independent of the API layer.
"""

from .models import StoryboardSegment

__all__ = [
    "StoryboardSegment",
]
