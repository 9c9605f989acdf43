from __future__ import annotations

from typing import Any, List, Optional

import pytest

from llm.client import DiagramClient
from llm.config import ClientConfig


class FakeMessage:
    def __init__(self, content: Any) -> None:
        self.content = content


class FakeChatModel:
    """Stands in for ChatGoogleGenerativeAI: records messages, replays canned output."""

    def __init__(self, text: str = "", chunks: Optional[List[Any]] = None, error: Optional[Exception] = None) -> None:
        self.text = text
        self.chunks = list(chunks or [])
        self.error = error
        self.invoked: List[list] = []
        self.streamed: List[list] = []

    def invoke(self, messages: list) -> FakeMessage:
        self.invoked.append(messages)
        if self.error:
            raise self.error
        return FakeMessage(self.text)

    def stream(self, messages: list):
        self.streamed.append(messages)
        for chunk in self.chunks:
            yield FakeMessage(chunk)
        if self.error:
            raise self.error


class RecordingFactory:
    def __init__(self, model: FakeChatModel) -> None:
        self.model = model
        self.calls: list = []

    def __call__(self, settings, api_key: str) -> FakeChatModel:
        self.calls.append((settings, api_key))
        return self.model


@pytest.fixture
def fake_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def factory(fake_model: FakeChatModel) -> RecordingFactory:
    return RecordingFactory(fake_model)


@pytest.fixture
def client(factory: RecordingFactory) -> DiagramClient:
    return DiagramClient(ClientConfig(api_key="test-key"), llm_factory=factory)


