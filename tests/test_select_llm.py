from __future__ import annotations

from typing import Any

import llm.select_llm as select_mod
from llm.settings import GenerationSettings


class _Recorder:
    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs


def test_get_llm_passes_thinking_budget(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(select_mod, "ChatGoogleGenerativeAI", _Recorder)
    llm = select_mod.get_llm(GenerationSettings("gemini-2.5-pro", 0.2, 10000), api_key="k")
    assert llm.kwargs == {
        "model": "gemini-2.5-pro",
        "temperature": 0.2,
        "google_api_key": "k",
        "thinking_budget": 10000,
    }


def test_get_llm_omits_unset_budget(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(select_mod, "ChatGoogleGenerativeAI", _Recorder)
    llm = select_mod.get_llm(GenerationSettings("gemini-2.5-flash", 0.0), api_key="k")
    assert "thinking_budget" not in llm.kwargs
