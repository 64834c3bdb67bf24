"""CLI entrypoint for design-bot."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from design_bot import __version__
from design_bot.config import DesignBotSettings
from design_bot.errors import DesignBotError, TranscriptValidationError
from design_bot.generation import GenerationClient
from design_bot.llm.openai_provider import OpenAIProvider
from design_bot.logging import configure_logging
from design_bot.pipeline import SUCCESS_MESSAGE, PipelineResources, TranscriptRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="design-bot",
        description="Turn a meeting transcript into a GitHub repository with issues",
    )
    parser.add_argument("--version", action="version", version=f"design-bot {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser(
        "process",
        help="Generate a design from a transcript and provision it on GitHub",
    )
    process.add_argument(
        "--transcript-file",
        required=True,
        help="Path to a UTF-8 transcript file, or '-' to read stdin",
    )
    process.add_argument(
        "--dry-run",
        action="store_true",
        help="Stop after generation and print the parsed design as JSON",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP endpoint")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="Port to bind")

    return parser


def _read_transcript(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return Path(value).read_text(encoding="utf-8")


def _process(args: argparse.Namespace, settings: DesignBotSettings) -> int:
    transcript = _read_transcript(args.transcript_file)
    if not transcript.strip():
        raise TranscriptValidationError("TranscriptText cannot be null or empty.")
    request = TranscriptRequest.model_validate({"TranscriptText": transcript})

    if args.dry_run:
        if not settings.openai_api_key.strip():
            print("Configuration error: OPENAI_API_KEY is required", file=sys.stderr)
            return 2
        llm = OpenAIProvider(settings)
        try:
            output = GenerationClient(llm=llm).generate(transcript)
        finally:
            llm.close()
        print(json.dumps(output.to_dict(), indent=2, ensure_ascii=False))
        return 0

    missing = settings.missing_credentials()
    if missing:
        print(f"Configuration error: {', '.join(missing)} required", file=sys.stderr)
        return 2

    with PipelineResources(settings) as pipeline:
        result = pipeline.run(request)

    print(SUCCESS_MESSAGE)
    if result.html_url:
        print(f"URL: {result.html_url}")
    issues = ", ".join(f"#{number}" for number in result.issue_numbers)
    print(f"Issues: {issues or 'none'}")
    return 0


def _serve(args: argparse.Namespace, settings: DesignBotSettings) -> int:
    import uvicorn

    from design_bot.server.app import create_app

    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = DesignBotSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "process":
            return _process(args, settings)
        if args.command == "serve":
            return _serve(args, settings)
    except DesignBotError as e:
        logger.error("Command failed", extra={"command": args.command, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
