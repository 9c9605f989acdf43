"""Request profiles and the per-task generation settings they select."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constants import TASK_SETTINGS


class Profile(str, Enum):
    FAST = "fast"
    THOROUGH = "thorough"

    @classmethod
    def from_flag(cls, deep_reasoning: bool) -> "Profile":
        return cls.THOROUGH if deep_reasoning else cls.FAST


class Task(str, Enum):
    TIKZ_FROM_DESCRIPTION = "tikz_from_description"
    TIKZ_FROM_IMAGE = "tikz_from_image"
    SVG_FROM_TIKZ = "svg_from_tikz"
    DESCRIBE_IMAGE = "describe_image"


@dataclass(frozen=True)
class GenerationSettings:
    model: str
    temperature: float
    thinking_budget: Optional[int] = None


def resolve_settings(task: Task, profile: Profile = Profile.FAST) -> GenerationSettings:
    """Look up model, temperature and thinking budget for a task/profile pair."""
    model, by_profile = TASK_SETTINGS[Task(task).value]
    temperature, budget = by_profile[Profile(profile).value]
    return GenerationSettings(model=model, temperature=temperature, thinking_budget=budget)


__all__ = ["Profile", "Task", "GenerationSettings", "resolve_settings"]
