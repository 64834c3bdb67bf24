"""Configuration for design-bot.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The settings object is built once at the edge (CLI or HTTP app) and handed to
the clients; business code never reads the environment directly.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DesignBotSettings(BaseSettings):
    """Settings for the transcript -> repository pipeline.

    Environment variables:
    - OPENAI_API_KEY
    - GITHUB_TOKEN
    - OPENAI_MODEL, OPENAI_BASE_URL          (optional)
    - GITHUB_BASE_URL, GITHUB_OWNER          (optional)
    - DESIGN_BOT_REPO_DESCRIPTION            (optional)
    - DESIGN_BOT_REPO_PRIVATE                (optional)
    - DESIGN_BOT_FUNCTION_KEY                (optional)
    - HTTP_TIMEOUT_SECONDS, LOG_LEVEL        (optional)

    Notes:
        Credentials default to empty so the HTTP server can start without them;
        callers check :meth:`missing_credentials` before building a pipeline.
        Tests can override the env file via `DesignBotSettings(_env_file=path)`.
    """

    openai_api_key: str = Field(
        default="",
        validation_alias="OPENAI_API_KEY",
        description="API key for the chat-completion endpoint",
    )
    openai_model: str = Field(
        default="gpt-4",
        validation_alias="OPENAI_MODEL",
        description="Model identifier used for generation",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        validation_alias="OPENAI_BASE_URL",
        description="Base URL of the OpenAI-compatible API",
    )

    github_token: str = Field(
        default="",
        validation_alias="GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    github_owner: str = Field(
        default="",
        validation_alias="GITHUB_OWNER",
        description=(
            "Account that owns created repositories. Empty or the token's own login "
            "creates them for the authenticated user; any other login is an organization."
        ),
    )

    repo_description: str = Field(
        default="Auto-generated project from meeting transcript",
        validation_alias="DESIGN_BOT_REPO_DESCRIPTION",
    )
    repo_private: bool = Field(default=True, validation_alias="DESIGN_BOT_REPO_PRIVATE")

    function_key: str = Field(
        default="",
        validation_alias="DESIGN_BOT_FUNCTION_KEY",
        description="Shared key required by the HTTP endpoint. Empty disables the check.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="HTTP_TIMEOUT_SECONDS",
        description="Timeout applied to every outbound HTTP call",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    def missing_credentials(self) -> list[str]:
        """Return the names of required credentials that are not configured."""

        missing: list[str] = []
        if not self.openai_api_key.strip():
            missing.append("OPENAI_API_KEY")
        if not self.github_token.strip():
            missing.append("GITHUB_TOKEN")
        return missing
