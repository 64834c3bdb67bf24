"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from design_bot.config import DesignBotSettings

_SETTINGS_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "GITHUB_OWNER",
    "DESIGN_BOT_REPO_DESCRIPTION",
    "DESIGN_BOT_REPO_PRIVATE",
    "DESIGN_BOT_FUNCTION_KEY",
    "HTTP_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep real credentials and `.env` files out of every test."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> DesignBotSettings:
    """Provide fully configured test settings."""
    return DesignBotSettings(
        openai_api_key="test-key",
        github_token="test-token",
        github_owner="octo-org",
    )


@pytest.fixture
def sample_completion() -> str:
    """A completion shaped the way the model usually answers."""
    return (
        "Project Name: Standup Tracker\n"
        "\n"
        "README.md:\n"
        "# Standup Tracker\n"
        "\n"
        "A small app for daily standups.\n"
        "\n"
        "File Structure:\n"
        "- src/\n"
        "- tests/\n"
        "\n"
        "Issues:\n"
        "1. Set up repository\n"
        "- Add CI workflow\n"
        "* Write API\n"
    )
