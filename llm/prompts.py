"""Prompt builder: system instruction plus user content for each task."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Type

from langchain_core.messages import HumanMessage, SystemMessage

from constants import IMAGE_ANALYST_PROMPT_PATH, SYSTEM_PROMPT_PATH, TIKZ_SNIPPETS_PATH
from llm.schema import DescriptionRequest, ImageRequest, TikzRequest
from llm.settings import Task

TIKZ_FROM_IMAGE_INSTRUCTION = (
    "Convert this image to TikZ code. Follow the rules: plane geometry = solid lines, "
    "space geometry = dashed lines for hidden edges only."
)
DESCRIBE_IMAGE_INSTRUCTION = (
    "Describe this geometry problem in detail so that I can convert it to TikZ. "
    "Note whether it is plane geometry (solid lines) or space geometry."
)
SVG_COMPILER_INSTRUCTION = (
    "You are a TikZ to SVG compiler. Draw an SVG image from the following TikZ code.\n"
    "CRITICAL REQUIREMENTS:\n"
    "1. Compute coordinates exactly, especially projections and midpoints.\n"
    "2. Plane geometry: use SOLID LINES everywhere. NO DASHED LINES.\n"
    "3. Return only the <svg>...</svg> code. No explanatory text."
)


@lru_cache(maxsize=None)
def _read(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def system_instruction() -> str:
    return _read(SYSTEM_PROMPT_PATH)


def tikz_snippets_context() -> str:
    return _read(TIKZ_SNIPPETS_PATH)


@dataclass
class Prompt:
    system_instruction: str
    parts: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(p["text"] for p in self.parts if p.get("type") == "text")

    def to_messages(self) -> list:
        if len(self.parts) == 1 and self.parts[0].get("type") == "text":
            content: Any = self.parts[0]["text"]
        else:
            content = list(self.parts)
        return [SystemMessage(content=self.system_instruction), HumanMessage(content=content)]


def _text(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def _image(request: ImageRequest) -> Dict[str, Any]:
    # data URLs are normalized to inline data by the Gemini adapter
    return {"type": "image_url", "image_url": {"url": request.data_uri}}


def _tikz_from_description(request: DescriptionRequest) -> Prompt:
    msg = (
        f"Context Snippets:\n{tikz_snippets_context()}\n\n"
        f"Request: Create TikZ code for the following description: {request.description}. "
        "Remember the solid-line rule for plane figures."
    )
    return Prompt(system_instruction(), [_text(msg)])


def _tikz_from_image(request: ImageRequest) -> Prompt:
    return Prompt(system_instruction(), [_image(request), _text(TIKZ_FROM_IMAGE_INSTRUCTION)])


def _describe_image(request: ImageRequest) -> Prompt:
    return Prompt(_read(IMAGE_ANALYST_PROMPT_PATH).strip(), [_image(request), _text(DESCRIBE_IMAGE_INSTRUCTION)])


def _svg_from_tikz(request: TikzRequest) -> Prompt:
    msg = f"{SVG_COMPILER_INSTRUCTION}\n\nTikZ code to draw:\n{request.tikz}"
    return Prompt(system_instruction(), [_text(msg)])


_BUILDERS: Dict[Task, Tuple[Type, Callable[[Any], Prompt]]] = {
    Task.TIKZ_FROM_DESCRIPTION: (DescriptionRequest, _tikz_from_description),
    Task.TIKZ_FROM_IMAGE: (ImageRequest, _tikz_from_image),
    Task.DESCRIBE_IMAGE: (ImageRequest, _describe_image),
    Task.SVG_FROM_TIKZ: (TikzRequest, _svg_from_tikz),
}


def build_prompt(task: Task, request) -> Prompt:
    """Assemble the prompt for ``task`` from a matching request variant."""
    expected, builder = _BUILDERS[Task(task)]
    if not isinstance(request, expected):
        raise ValueError(f"{Task(task).value} expects {expected.__name__}, got {type(request).__name__}")
    return builder(request)


__all__ = ["Prompt", "build_prompt", "system_instruction", "tikz_snippets_context"]
