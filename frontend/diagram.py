"""Diagram generation pipeline for the UI.

Wraps ``DiagramClient`` calls into streams of dict events so the Gradio
callbacks only have to map events onto components:
- {"type": "log", "text": str}
- {"type": "tikz", "tikz": str}
- {"type": "svg", "svg": str}       growing fragment while streaming
- Final: {"type": "final", "outputs": {"tex"/"svg": bytes present}}

Generation errors become log events; the final event is always emitted.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Generator, Optional

from llm.client import DiagramClient
from llm.errors import GenerationError
from llm.settings import Profile

LOGGER = logging.getLogger("tikzsvg.frontend.diagram")

Event = Dict[str, Any]


def render_tikz(
    client: DiagramClient,
    description: str = "",
    image_data_uri: Optional[str] = None,
    profile: Profile = Profile.FAST,
) -> Generator[Event, None, None]:
    """Generate TikZ from an image (preferred when given) or a description."""
    tikz = ""
    try:
        if image_data_uri:
            yield {"type": "log", "text": f"[TikZ] Converting image ({profile.value})..."}
            tikz = client.generate_tikz_from_image(image_data_uri, profile=profile)
        elif description and description.strip():
            yield {"type": "log", "text": f"[TikZ] Generating from description ({profile.value})..."}
            tikz = client.generate_tikz_from_description(description.strip(), profile=profile)
        else:
            yield {"type": "log", "text": "[TikZ] Nothing to convert: enter a description or upload an image."}
    except GenerationError as e:
        LOGGER.warning("TikZ generation failed: %s", e)
        yield {"type": "log", "text": f"[ERROR] {e}"}

    if tikz:
        yield {"type": "tikz", "tikz": tikz}
        yield {"type": "log", "text": "[TikZ] Done."}
    outputs: Dict[str, bytes] = {"tex": tikz.encode("utf-8")} if tikz else {}
    yield {"type": "final", "outputs": outputs}


def describe_image(client: DiagramClient, image_data_uri: Optional[str]) -> Generator[Event, None, None]:
    if not image_data_uri:
        yield {"type": "log", "text": "[Describe] Upload an image first."}
        yield {"type": "final", "description": ""}
        return
    yield {"type": "log", "text": "[Describe] Reading image..."}
    try:
        description = client.generate_description_from_image(image_data_uri)
    except GenerationError as e:
        LOGGER.warning("Image description failed: %s", e)
        yield {"type": "log", "text": f"[ERROR] {e}"}
        description = ""
    yield {"type": "final", "description": description.strip()}


def render_svg_stream(
    client: DiagramClient,
    tikz_code: str,
    profile: Profile = Profile.FAST,
) -> Generator[Event, None, None]:
    """Stream SVG fragments for a live preview, then the final outputs."""
    if not tikz_code or not tikz_code.strip():
        yield {"type": "log", "text": "[SVG] Nothing to render: TikZ code is empty."}
        yield {"type": "final", "outputs": {}}
        return

    yield {"type": "log", "text": f"[SVG] Rendering ({profile.value})..."}
    last_svg = ""
    updates = 0
    try:
        for partial in client.stream_svg_from_tikz(tikz_code, profile=profile):
            last_svg = partial
            updates += 1
            yield {"type": "svg", "svg": partial}
    except GenerationError as e:
        LOGGER.warning("SVG rendering failed after %d updates: %s", updates, e)
        yield {"type": "log", "text": f"[ERROR] {e}"}

    if last_svg and not last_svg.endswith("</svg>"):
        yield {"type": "log", "text": "[SVG] Stream ended before </svg>; the preview may be incomplete."}
    elif last_svg:
        yield {"type": "log", "text": f"[SVG] Done ({updates} updates)."}
    else:
        yield {"type": "log", "text": "[SVG] The model returned no <svg> element."}

    outputs: Dict[str, bytes] = {"tex": tikz_code.encode("utf-8")}
    if last_svg:
        outputs["svg"] = last_svg.encode("utf-8")
    yield {"type": "final", "outputs": outputs}


__all__ = ["render_tikz", "describe_image", "render_svg_stream"]
