#!/usr/bin/env python3
"""Programmatic transcript processing example.

This demonstrates using the components directly:

* load settings from `.env`
* generate a project design from a transcript file
* optionally provision the repository, README and issues on GitHub
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from design_bot.config import DesignBotSettings
from design_bot.generation import GenerationClient
from design_bot.github.client import GitHubClient
from design_bot.llm.openai_provider import OpenAIProvider
from design_bot.logging import configure_logging
from design_bot.provisioning import ProvisioningService


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Process a transcript (programmatic example).")
    parser.add_argument("transcript", type=Path, help="Path to a transcript text file")
    parser.add_argument(
        "--provision",
        action="store_true",
        help="Create the repository and issues (default: print the design only)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = DesignBotSettings()
    configure_logging(settings.log_level)

    llm = OpenAIProvider(settings)
    try:
        output = GenerationClient(llm=llm).generate(args.transcript.read_text(encoding="utf-8"))
    finally:
        llm.close()

    print(f"Project: {output.project_name}")
    for title in output.issues:
        print(f"  - {title}")

    if not args.provision:
        return 0

    github = GitHubClient(
        token=settings.github_token,
        base_url=settings.github_base_url,
        timeout=settings.http_timeout_seconds,
    )
    try:
        result = ProvisioningService(github=github, settings=settings).provision(output)
    finally:
        github.close()

    print(f"Created {result.repository} with {len(result.issue_numbers)} issues")
    print(f"URL: {result.html_url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
