"""GitHub API client wrapper.

Wraps PyGithub (repository and issue creation) and a plain REST session
(contents API) to keep GitHub calls out of the pipeline and make tests easy.
Every method raises on a non-success response; nothing is retried.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any

import requests
from github import Auth, Github

logger = logging.getLogger(__name__)

USER_AGENT = "design-bot"


@dataclass(frozen=True, slots=True)
class CreatedRepository:
    """Minimal repository metadata returned from GitHub."""

    full_name: str
    owner: str
    name: str
    html_url: str | None


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    """Minimal issue metadata returned from GitHub."""

    repository: str
    number: int
    title: str


class GitHubClient:
    """Small wrapper around PyGithub and the REST contents API."""

    def __init__(
        self,
        *,
        token: str,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        github_api: Github | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")

        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout

        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": USER_AGENT,
            }
        )

        auth = Auth.Token(token)
        self._github = github_api or Github(
            auth=auth,
            base_url=self._rest_base_url,
            timeout=timeout,
            user_agent=USER_AGENT,
        )

    def _contents_url(self, *, repository: str, path: str) -> str:
        norm = path.lstrip("/")
        return f"{self._rest_base_url}/repos/{repository}/contents/{norm}"

    def create_repository(
        self,
        *,
        name: str,
        description: str,
        private: bool = True,
        auto_init: bool = True,
        owner: str | None = None,
    ) -> CreatedRepository:
        """Create a repository.

        Without `owner`, or when `owner` is the authenticated user, the
        repository is created with `POST /user/repos`; any other owner is
        treated as an organization (`POST /orgs/{owner}/repos`).
        """

        if not name.strip():
            raise ValueError("Repository name is required")

        logger.info(
            "Creating repository",
            extra={"repo_name": name, "owner": owner or "", "private": private},
        )
        user = self._github.get_user()
        if owner and owner.lower() != user.login.lower():
            creator = self._github.get_organization(owner)
        else:
            creator = user

        repo = creator.create_repo(
            name,
            description=description,
            private=private,
            auto_init=auto_init,
        )

        created = CreatedRepository(
            full_name=repo.full_name,
            owner=repo.owner.login,
            name=repo.name,
            html_url=getattr(repo, "html_url", None),
        )
        logger.info("Repository created", extra={"repo": created.full_name})
        return created

    def get_file_sha(self, *, repository: str, path: str) -> str | None:
        """Return the blob sha of a file, or None when it does not exist."""

        url = self._contents_url(repository=repository, path=path)
        resp = self._session.get(url, timeout=self._timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
        sha = data.get("sha")
        if not isinstance(sha, str) or not sha.strip():
            raise ValueError("Unexpected contents response: missing sha")
        return sha

    def upsert_text_file(
        self,
        *,
        repository: str,
        path: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> str:
        """Create or update a text file via the contents API.

        Returns:
            New file sha.
        """

        url = self._contents_url(repository=repository, path=path)
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("utf-8"),
        }
        if sha is not None and sha.strip():
            payload["sha"] = sha

        logger.info("Committing file", extra={"repo": repository, "path": path})
        resp = self._session.put(url, json=payload, timeout=self._timeout)
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()
        content_info = data.get("content")
        if isinstance(content_info, dict):
            new_sha = content_info.get("sha")
            if isinstance(new_sha, str) and new_sha.strip():
                return new_sha
        raise ValueError("Unexpected contents upsert response: missing content sha")

    def create_issue(self, *, repository: str, title: str) -> CreatedIssue:
        """Create an issue with a title and no body."""

        if not title.strip():
            raise ValueError("Issue title is required")

        repo = self._github.get_repo(repository, lazy=True)
        issue = repo.create_issue(title=title)

        logger.info("Issue created", extra={"repo": repository, "issue_number": issue.number})
        return CreatedIssue(repository=repository, number=issue.number, title=issue.title)

    def close(self) -> None:
        self._session.close()
        self._github.close()
