"""GitHub integration."""

from design_bot.github.client import CreatedIssue, CreatedRepository, GitHubClient

__all__ = ["CreatedIssue", "CreatedRepository", "GitHubClient"]
