from __future__ import annotations

from llm.config import ClientConfig


def test_from_env_prefers_gemini_key() -> None:
    cfg = ClientConfig.from_env({"GEMINI_API_KEY": "g", "GOOGLE_API_KEY": "x"})
    assert cfg.api_key == "g"


def test_from_env_falls_back_to_google_key() -> None:
    assert ClientConfig.from_env({"GOOGLE_API_KEY": " k "}).api_key == "k"


def test_missing_key_is_not_an_error_at_load() -> None:
    assert ClientConfig.from_env({}).api_key is None
    assert ClientConfig.from_env({"GEMINI_API_KEY": "  "}).api_key is None


def test_from_process_env(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert ClientConfig.from_env(dotenv=False).api_key == "from-env"
