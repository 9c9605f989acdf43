from pathlib import Path

PROMPTS_DIR = Path(__file__).resolve().parent / "prompts"
SYSTEM_PROMPT_PATH = PROMPTS_DIR / "system.txt"
IMAGE_ANALYST_PROMPT_PATH = PROMPTS_DIR / "image_analyst.txt"
TIKZ_SNIPPETS_PATH = PROMPTS_DIR / "tikz_snippets.txt"

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

PRO_MODEL = "gemini-2.5-pro"      # deep reasoning, used for TikZ and image analysis
FAST_MODEL = "gemini-2.5-flash"   # fast drawing, used for SVG rendering

# task -> (model, {profile: (temperature, thinking_budget)})
TASK_SETTINGS = {
    "tikz_from_description": (PRO_MODEL, {"fast": (0.1, None), "thorough": (0.2, 10000)}),
    "tikz_from_image": (PRO_MODEL, {"fast": (0.0, None), "thorough": (0.0, 16000)}),
    "svg_from_tikz": (FAST_MODEL, {"fast": (0.0, None), "thorough": (0.0, 15000)}),
    "describe_image": (PRO_MODEL, {"fast": (0.1, None), "thorough": (0.1, None)}),
}

MAX_DESCRIPTION_CHARS = 4000
DEFAULT_IMAGE_MIME = "image/png"
