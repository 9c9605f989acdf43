"""Pull a TikZ picture or an SVG element out of free-form model output.

Both extractors are pure and idempotent, so they can be re-run on a growing
buffer after every streamed chunk to drive a live preview.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Iterator, Optional

Extractor = Callable[[str], str]

_TIKZ_RE = re.compile(r"\\begin\{tikzpicture\}[\s\S]*?\\end\{tikzpicture\}")
_FENCE_RE = re.compile(r"```latex|```tikz|```")

SVG_OPEN = "<svg"
SVG_CLOSE = "</svg>"


def extract_tikz(text: str) -> str:
    """Return the first tikzpicture environment, delimiters included.

    Without one, fall back to the text with code fences removed.
    """
    if not text:
        return ""
    m = _TIKZ_RE.search(text)
    if m:
        return m.group(0)
    return _FENCE_RE.sub("", text).strip()


def extract_svg(text: str) -> str:
    """Return the slice from the first ``<svg`` through the last ``</svg>``.

    An unterminated element (still streaming) is returned up to the end of
    the buffer. No opening tag gives "".
    """
    clean = (text or "").strip()
    start = clean.find(SVG_OPEN)
    if start == -1:
        return ""
    end = clean.rfind(SVG_CLOSE)
    if end == -1 or end < start:
        return clean[start:]
    return clean[start:end + len(SVG_CLOSE)]


class StreamingExtractor:
    """Accumulate streamed chunks and re-extract over the whole buffer."""

    def __init__(self, extractor: Extractor):
        self._extractor = extractor
        self._parts: list = []

    @property
    def buffer(self) -> str:
        return "".join(self._parts)

    @property
    def result(self) -> str:
        return self._extractor(self.buffer)

    def feed(self, chunk: str) -> str:
        if chunk:
            self._parts.append(chunk)
        return self.result


def iter_partials(chunks: Iterable[str], extractor: Extractor) -> Iterator[str]:
    """Yield every non-empty extraction, one per chunk, in arrival order."""
    acc = StreamingExtractor(extractor)
    for chunk in chunks:
        current = acc.feed(chunk)
        if current:
            yield current


def extract_stream(
    chunks: Iterable[str],
    extractor: Extractor,
    on_progress: Optional[Callable[[str], None]] = None,
) -> str:
    """Consume ``chunks``, reporting growing fragments, and return the final extraction."""
    acc = StreamingExtractor(extractor)
    for chunk in chunks:
        current = acc.feed(chunk)
        if current and on_progress is not None:
            on_progress(current)
    return acc.result


__all__ = [
    "extract_tikz",
    "extract_svg",
    "StreamingExtractor",
    "iter_partials",
    "extract_stream",
]
