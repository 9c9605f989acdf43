"""Turn uploaded image files into data URIs for the Gemini client."""
from __future__ import annotations

import base64
import mimetypes
from typing import Optional

from constants import DEFAULT_IMAGE_MIME


def file_to_data_uri(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    mime, _ = mimetypes.guess_type(path)
    if not mime or not mime.startswith("image/"):
        mime = DEFAULT_IMAGE_MIME
    with open(path, "rb") as f:
        b64 = base64.b64encode(f.read()).decode("ascii")
    return f"data:{mime};base64,{b64}"


__all__ = ["file_to_data_uri"]
