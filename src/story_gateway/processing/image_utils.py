"""
Image utility functions: data-URI parsing/building and file conversion.
"""

import base64
import re
from io import BytesIO
from pathlib import Path
from typing import Tuple

from PIL import Image

from ..config import DEFAULT_IMAGE_MIME

_MIME_RE = re.compile(r":(.*?);")


def parse_data_uri(uri: str) -> Tuple[str, str]:
    """
    Split a data-URI into its MIME type and base64 payload.

    The header is everything before the first comma. The MIME type is read
    from between ':' and ';' in the header, falling back to image/png.

    Args:
        uri: String of the form data:<mime>;base64,<payload>.

    Returns:
        (mime_type, payload). Payload is empty if the URI has no comma.
    """
    header, _, payload = uri.partition(",")
    match = _MIME_RE.search(header)
    mime_type = match.group(1) if match and match.group(1) else DEFAULT_IMAGE_MIME
    return mime_type, payload


def build_data_uri(mime_type: str, payload: str) -> str:
    """Inverse of parse_data_uri()."""
    return f"data:{mime_type or DEFAULT_IMAGE_MIME};base64,{payload}"


def load_image_as_data_uri(path: Path) -> str:
    """
    Load an image from disk, re-encode as PNG, and return it as a data-URI.

    Ensures a consistent format for style references regardless of source format.
    """
    img = Image.open(path).convert("RGBA")
    buffer = BytesIO()
    img.save(buffer, format="PNG", compress_level=0, optimize=False)
    payload = base64.b64encode(buffer.getvalue()).decode("utf-8")
    return build_data_uri("image/png", payload)


def save_data_uri_image(uri: str, dest_stem: Path) -> Path:
    """
    Decode a data-URI image and save it as PNG to dest_stem.png.

    Args:
        uri: Image data-URI (e.g. a generated scene).
        dest_stem: Destination path without extension.

    Returns:
        Path to saved PNG file.
    """
    _, payload = parse_data_uri(uri)
    dest_stem = Path(dest_stem)
    dest_stem.parent.mkdir(parents=True, exist_ok=True)
    img = Image.open(BytesIO(base64.b64decode(payload)))
    out_path = dest_stem.with_suffix(".png")
    img.save(out_path, format="PNG")
    return out_path
