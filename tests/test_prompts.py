from __future__ import annotations

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from llm.prompts import build_prompt, system_instruction, tikz_snippets_context
from llm.schema import DescriptionRequest, ImageRequest, TikzRequest
from llm.settings import Task

PNG_URI = "data:image/png;base64,iVBORw0KGgo="


def test_system_instruction_carries_geometry_rules() -> None:
    text = system_instruction()
    assert "SOLID LINES" in text
    assert "dashed lines only for hidden edges" in text
    assert "legend" in text.lower()


def test_tikz_from_description_embeds_snippets_and_description() -> None:
    prompt = build_prompt(Task.TIKZ_FROM_DESCRIPTION, DescriptionRequest(description="isosceles triangle ABC"))
    assert prompt.system_instruction == system_instruction()
    assert tikz_snippets_context() in prompt.text
    assert "isosceles triangle ABC" in prompt.text


def test_svg_from_tikz_appends_source() -> None:
    prompt = build_prompt(Task.SVG_FROM_TIKZ, TikzRequest(tikz="\\draw (0,0) -- (1,1);"))
    assert prompt.text.endswith("\\draw (0,0) -- (1,1);")
    assert "<svg>...</svg>" in prompt.text


def test_image_prompts_put_image_first() -> None:
    req = ImageRequest.from_data_uri(PNG_URI)
    for task in (Task.TIKZ_FROM_IMAGE, Task.DESCRIBE_IMAGE):
        prompt = build_prompt(task, req)
        assert prompt.parts[0] == {"type": "image_url", "image_url": {"url": PNG_URI}}
        assert prompt.parts[1]["type"] == "text"


def test_describe_image_uses_analyst_instruction() -> None:
    prompt = build_prompt(Task.DESCRIBE_IMAGE, ImageRequest.from_data_uri(PNG_URI))
    assert prompt.system_instruction != system_instruction()
    assert "analysing mathematics problems" in prompt.system_instruction


def test_to_messages() -> None:
    text_msgs = build_prompt(Task.SVG_FROM_TIKZ, TikzRequest(tikz="x")).to_messages()
    assert isinstance(text_msgs[0], SystemMessage)
    assert isinstance(text_msgs[1], HumanMessage)
    assert isinstance(text_msgs[1].content, str)

    image_msgs = build_prompt(Task.TIKZ_FROM_IMAGE, ImageRequest.from_data_uri(PNG_URI)).to_messages()
    assert isinstance(image_msgs[1].content, list)
    assert len(image_msgs[1].content) == 2


def test_mismatched_request_is_rejected() -> None:
    with pytest.raises(ValueError):
        build_prompt(Task.SVG_FROM_TIKZ, DescriptionRequest(description="x"))
