"""LLM package initialization."""

from design_bot.llm.openai_provider import OpenAIProvider
from design_bot.llm.provider import LLMProvider

__all__ = [
    "LLMProvider",
    "OpenAIProvider",
]
