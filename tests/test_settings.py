from __future__ import annotations

import pytest

from constants import FAST_MODEL, PRO_MODEL
from llm.settings import GenerationSettings, Profile, Task, resolve_settings


def test_profile_from_flag() -> None:
    assert Profile.from_flag(True) is Profile.THOROUGH
    assert Profile.from_flag(False) is Profile.FAST


@pytest.mark.parametrize(
    "task, profile, expected",
    [
        (Task.TIKZ_FROM_DESCRIPTION, Profile.FAST, GenerationSettings(PRO_MODEL, 0.1, None)),
        (Task.TIKZ_FROM_DESCRIPTION, Profile.THOROUGH, GenerationSettings(PRO_MODEL, 0.2, 10000)),
        (Task.TIKZ_FROM_IMAGE, Profile.THOROUGH, GenerationSettings(PRO_MODEL, 0.0, 16000)),
        (Task.SVG_FROM_TIKZ, Profile.FAST, GenerationSettings(FAST_MODEL, 0.0, None)),
        (Task.SVG_FROM_TIKZ, Profile.THOROUGH, GenerationSettings(FAST_MODEL, 0.0, 15000)),
        (Task.DESCRIBE_IMAGE, Profile.THOROUGH, GenerationSettings(PRO_MODEL, 0.1, None)),
    ],
)
def test_resolve_settings(task: Task, profile: Profile, expected: GenerationSettings) -> None:
    assert resolve_settings(task, profile) == expected


def test_resolve_settings_accepts_plain_values() -> None:
    assert resolve_settings("svg_from_tikz", "thorough").thinking_budget == 15000
