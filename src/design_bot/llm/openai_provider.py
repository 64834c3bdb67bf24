"""OpenAI LLM provider implementation."""

import logging
from typing import Any

from openai import OpenAI, OpenAIError

from design_bot.config import DesignBotSettings
from design_bot.errors import UpstreamError
from design_bot.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completions provider."""

    def __init__(self, settings: DesignBotSettings, client: OpenAI | None = None) -> None:
        """Initialize the OpenAI provider.

        Args:
            settings: Application settings.
            client: Pre-built client (tests inject a mock here).

        Raises:
            ValueError: If API key is not provided.
        """
        if client is None and not settings.openai_api_key:
            raise ValueError("OpenAI API key is required")

        self.model = settings.openai_model
        # Retries are disabled: a failed generation fails the request.
        self.client = client or OpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.http_timeout_seconds,
            max_retries=0,
        )

        logger.info("OpenAI provider initialized", extra={"model": self.model})

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        """Generate chat completion using OpenAI API.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            **kwargs: Additional OpenAI-specific parameters.

        Returns:
            Content of `choices[0].message`.

        Raises:
            UpstreamError: If the request fails, the body cannot be decoded, or
                the response lacks `choices[0].message.content`.
        """
        logger.debug("Requesting chat completion", extra={"message_count": len(messages)})

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,  # type: ignore
                **kwargs,
            )
        except (OpenAIError, ValueError) as e:
            raise UpstreamError(f"Chat completion request failed: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise UpstreamError("Chat completion response has no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise UpstreamError("Chat completion response has no message content")

        logger.debug("Chat completion received", extra={"characters": len(content)})
        return content

    def close(self) -> None:
        self.client.close()
