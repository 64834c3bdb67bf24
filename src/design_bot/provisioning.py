"""Materialise a :class:`DesignOutput` on GitHub.

Steps run strictly in order, each after the previous call returned:

1. create the repository (auto-initialised)
2. commit README.md at the repository root
3. create one issue per work item, in order

A failing step raises :class:`ProvisioningError`; earlier steps are not undone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests
from github import GithubException

from design_bot.config import DesignBotSettings
from design_bot.errors import ProvisioningError
from design_bot.extraction import DesignOutput
from design_bot.github.client import GitHubClient

logger = logging.getLogger(__name__)

README_PATH = "README.md"
README_COMMIT_MESSAGE = "Initial commit"

_REMOTE_ERRORS = (GithubException, requests.RequestException, ValueError)


@dataclass(frozen=True, slots=True)
class ProvisioningResult:
    """What was created for one design."""

    repository: str
    html_url: str | None
    readme_sha: str
    issue_numbers: tuple[int, ...]


class ProvisioningService:
    """Creates the repository, README and issues for a design."""

    def __init__(self, *, github: GitHubClient, settings: DesignBotSettings) -> None:
        self._github = github
        self._owner = settings.github_owner.strip()
        self._description = settings.repo_description
        self._private = settings.repo_private

    def provision(self, output: DesignOutput) -> ProvisioningResult:
        repository = output.project_name
        issue_numbers: list[int] = []

        def fail(step: str, exc: Exception) -> ProvisioningError:
            logger.error(
                "Provisioning step failed",
                extra={"step": step, "repo": repository, "created_issues": issue_numbers},
            )
            return ProvisioningError(
                step=step,
                repository=repository,
                reason=str(exc),
                created_issue_numbers=tuple(issue_numbers),
            )

        try:
            created = self._github.create_repository(
                name=output.project_name,
                description=self._description,
                private=self._private,
                auto_init=True,
                owner=self._owner or None,
            )
        except _REMOTE_ERRORS as e:
            raise fail("create_repository", e) from e

        repository = created.full_name

        # Auto-init already committed a README.md; its sha is needed to replace it.
        try:
            existing_sha = self._github.get_file_sha(repository=repository, path=README_PATH)
            readme_sha = self._github.upsert_text_file(
                repository=repository,
                path=README_PATH,
                content=output.readme,
                message=README_COMMIT_MESSAGE,
                sha=existing_sha,
            )
        except _REMOTE_ERRORS as e:
            raise fail("create_readme", e) from e

        for title in output.issues:
            try:
                issue = self._github.create_issue(repository=repository, title=title)
            except _REMOTE_ERRORS as e:
                raise fail("create_issue", e) from e
            issue_numbers.append(issue.number)

        logger.info(
            "Provisioning complete",
            extra={"repo": repository, "issue_count": len(issue_numbers)},
        )
        return ProvisioningResult(
            repository=repository,
            html_url=created.html_url,
            readme_sha=readme_sha,
            issue_numbers=tuple(issue_numbers),
        )
