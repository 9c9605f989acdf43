from langchain_google_genai import ChatGoogleGenerativeAI

from llm.settings import GenerationSettings


def get_llm(settings: GenerationSettings, api_key: str):
    kwargs = dict(
        model=settings.model,
        temperature=settings.temperature,
        google_api_key=api_key,
    )
    # Gemini 2.5 thinking; leave the model default when unset
    if settings.thinking_budget is not None:
        kwargs["thinking_budget"] = settings.thinking_budget
    return ChatGoogleGenerativeAI(**kwargs)
