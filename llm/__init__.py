"""Gemini client for TikZ <-> SVG conversion.

- Prompt building for the four tasks (TikZ from text or image, SVG from TikZ, image description)
- Extraction of a tikzpicture / <svg> fragment from free-form model output, per streamed chunk
- A single client object holding the credential, injected at composition time
"""
from .client import DiagramClient
from .config import ClientConfig
from .errors import ConfigurationError, GenerationError, InvalidImageError, UpstreamError
from .extract import extract_svg, extract_tikz
from .settings import Profile, Task

__all__ = [
    "DiagramClient",
    "ClientConfig",
    "GenerationError",
    "ConfigurationError",
    "InvalidImageError",
    "UpstreamError",
    "extract_svg",
    "extract_tikz",
    "Profile",
    "Task",
]
