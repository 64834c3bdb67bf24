"""Parse a free-text completion into project name, README and issue titles.

The completion is expected to contain three loosely labelled sections::

    Project Name: My Cool App
    README.md:
    # My Cool App
    ...
    Issues:
    - Set up CI
    - Write the parser

Each section is located independently by pattern matching over the whole
text. Missing sections fall back to fixed defaults, so parsing never fails.

Known sharp edge: the README ends at the *first* "Issues" label that follows
it, even when that word appears inside the README body itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DEFAULT_PROJECT_NAME = "auto-project"
DEFAULT_README = "# Auto-generated Project\n\nGenerated from transcript."

_PROJECT_NAME_RE = re.compile(r"Project Name[:\s]*([^\r\n]+)", re.IGNORECASE)
_README_RE = re.compile(r"README(?:\.md)?[:\s]*([\s\S]+?)Issues[:\s]*", re.IGNORECASE)
_ISSUES_RE = re.compile(r"Issues[:\s]*([\s\S]+)$", re.IGNORECASE)

_WHITESPACE_RUN_RE = re.compile(r"\s+")
# GitHub repository names allow ASCII letters, digits, '.', '-' and '_'.
_ILLEGAL_REPO_CHARS_RE = re.compile(r"[^a-z0-9._-]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")

_BULLET_CHARS = "-*"


@dataclass(frozen=True, slots=True)
class DesignOutput:
    """Structured project design derived from one completion."""

    project_name: str
    readme: str
    issues: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "project_name": self.project_name,
            "readme": self.readme,
            "issues": list(self.issues),
        }


def normalize_project_name(raw: str) -> str:
    """Turn a free-text project name into a repository name.

    Whitespace runs become single hyphens and the result is lowercased.
    Characters GitHub rejects are dropped; an empty result yields
    :data:`DEFAULT_PROJECT_NAME`.
    """

    name = _WHITESPACE_RUN_RE.sub("-", raw.strip()).lower()
    name = _ILLEGAL_REPO_CHARS_RE.sub("", name)
    name = _HYPHEN_RUN_RE.sub("-", name).strip("-")
    # "." and ".." are reserved by GitHub.
    if not name.strip("."):
        return DEFAULT_PROJECT_NAME
    return name


def _extract_project_name(content: str) -> str:
    match = _PROJECT_NAME_RE.search(content)
    if match is None:
        return DEFAULT_PROJECT_NAME
    return normalize_project_name(match.group(1))


def _extract_readme(content: str) -> str:
    match = _README_RE.search(content)
    if match is None:
        return DEFAULT_README
    return match.group(1).strip()


def _extract_issues(content: str) -> tuple[str, ...]:
    match = _ISSUES_RE.search(content)
    if match is None:
        return ()

    issues: list[str] = []
    for line in match.group(1).strip().split("\n"):
        title = line.strip().lstrip(_BULLET_CHARS).strip()
        if title:
            issues.append(title)
    return tuple(issues)


def parse_design_output(content: str) -> DesignOutput:
    """Parse one completion text into a :class:`DesignOutput`.

    Pure and total: any input, including an empty string, yields a fully
    populated record.
    """

    return DesignOutput(
        project_name=_extract_project_name(content),
        readme=_extract_readme(content),
        issues=_extract_issues(content),
    )
