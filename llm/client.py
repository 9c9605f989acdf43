"""Gemini-backed TikZ/SVG conversions.

Every operation makes exactly one model call: single-shot ``invoke``, or
``stream`` when the caller wants progress. Streamed text is re-extracted over
the accumulated buffer after each chunk, so progress callbacks receive
growing fragments rather than diffs.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from llm.config import ClientConfig
from llm.errors import ConfigurationError, UpstreamError
from llm.extract import Extractor, extract_stream, extract_svg, extract_tikz, iter_partials
from llm.prompts import build_prompt
from llm.schema import DescriptionRequest, ImageRequest, TikzRequest
from llm.select_llm import get_llm
from llm.settings import Profile, Task, resolve_settings

LOGGER = logging.getLogger("tikzsvg.llm.client")

ProgressCallback = Callable[[str], None]


def extract_text(content) -> str:
    """Safely extract text from LangChain content (list or str); thinking parts are dropped."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for p in content:
            if isinstance(p, dict) and p.get("type") == "text":
                parts.append(p.get("text", ""))
            elif isinstance(p, str):
                parts.append(p)
        return "".join(parts)
    return str(content)


class DiagramClient:
    def __init__(self, config: ClientConfig, llm_factory=get_llm):
        self.config = config
        self._llm_factory = llm_factory

    def _require_api_key(self) -> str:
        if not self.config.api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY is not configured. Set it in the environment or a .env file."
            )
        return self.config.api_key

    def _model(self, task: Task, profile: Profile):
        settings = resolve_settings(task, profile)
        LOGGER.info(
            "%s: model=%s temperature=%s thinking_budget=%s",
            task.value, settings.model, settings.temperature, settings.thinking_budget,
        )
        return self._llm_factory(settings, api_key=self.config.api_key)

    def _complete(self, task: Task, request) -> str:
        llm = self._model(task, request.profile)
        messages = build_prompt(task, request).to_messages()
        try:
            response = llm.invoke(messages)
        except Exception as e:
            LOGGER.error("%s: Gemini request failed: %s", task.value, e)
            raise UpstreamError(f"Gemini request failed for {task.value}: {e}") from e
        text = extract_text(getattr(response, "content", None))
        if not text.strip():
            raise UpstreamError(f"Gemini returned no text for {task.value}.")
        return text

    def _stream(self, task: Task, request) -> Iterator[str]:
        llm = self._model(task, request.profile)
        messages = build_prompt(task, request).to_messages()
        received = 0
        try:
            for chunk in llm.stream(messages):
                text = extract_text(getattr(chunk, "content", None))
                if text:
                    received += 1
                    yield text
        except Exception as e:
            LOGGER.error("%s: Gemini stream failed after %d chunks: %s", task.value, received, e)
            raise UpstreamError(f"Gemini stream failed for {task.value}: {e}") from e
        LOGGER.debug("%s: stream finished with %d chunks", task.value, received)
        if not received:
            raise UpstreamError(f"Gemini returned no text for {task.value}.")

    def _run(self, task: Task, request, extractor: Extractor, on_chunk: Optional[ProgressCallback]) -> str:
        if on_chunk is None:
            return extractor(self._complete(task, request))
        return extract_stream(self._stream(task, request), extractor, on_progress=on_chunk)

    def generate_tikz_from_description(
        self,
        description: str,
        profile: Profile = Profile.FAST,
        on_chunk: Optional[ProgressCallback] = None,
    ) -> str:
        self._require_api_key()
        request = DescriptionRequest(description=description, profile=profile)
        return self._run(Task.TIKZ_FROM_DESCRIPTION, request, extract_tikz, on_chunk)

    def generate_description_from_image(self, data_uri: str) -> str:
        """Return the model's free-text reading of a problem image."""
        self._require_api_key()
        request = ImageRequest.from_data_uri(data_uri)
        return self._complete(Task.DESCRIBE_IMAGE, request)

    def generate_tikz_from_image(
        self,
        data_uri: str,
        profile: Profile = Profile.FAST,
        on_chunk: Optional[ProgressCallback] = None,
    ) -> str:
        self._require_api_key()
        request = ImageRequest.from_data_uri(data_uri, profile=profile)
        return self._run(Task.TIKZ_FROM_IMAGE, request, extract_tikz, on_chunk)

    def generate_svg_from_tikz(
        self,
        tikz_code: str,
        profile: Profile = Profile.FAST,
        on_chunk: Optional[ProgressCallback] = None,
    ) -> str:
        self._require_api_key()
        request = TikzRequest(tikz=tikz_code, profile=profile)
        return self._run(Task.SVG_FROM_TIKZ, request, extract_svg, on_chunk)

    def stream_svg_from_tikz(self, tikz_code: str, profile: Profile = Profile.FAST) -> Iterator[str]:
        """Yield the growing SVG fragment as tokens arrive.

        The last value yielded equals what ``generate_svg_from_tikz`` would
        return for the same stream, unless the stream held no ``<svg`` at all.
        """
        self._require_api_key()
        request = TikzRequest(tikz=tikz_code, profile=profile)
        yield from iter_partials(self._stream(Task.SVG_FROM_TIKZ, request), extract_svg)


__all__ = ["DiagramClient", "extract_text"]
