"""Ask the LLM for a project design and parse the answer."""

from __future__ import annotations

import logging

from design_bot.extraction import DesignOutput, parse_design_output
from design_bot.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You generate software project specs from transcripts."

USER_PROMPT_TEMPLATE = (
    "You are an expert software engineer. From the transcript below, generate: "
    "- A project name "
    "- A README.md "
    "- A file structure "
    "- A list of GitHub issues to complete the project "
    'Transcript: "{transcript}"'
)


def build_messages(transcript_text: str) -> list[dict[str, str]]:
    """Return the fixed two-message conversation for a transcript.

    The transcript is embedded verbatim; it is not escaped or truncated.
    """

    user_prompt = USER_PROMPT_TEMPLATE.format(transcript=transcript_text)
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


class GenerationClient:
    """Turns a transcript into a :class:`DesignOutput` with one LLM call."""

    def __init__(self, *, llm: LLMProvider) -> None:
        self._llm = llm

    def generate(self, transcript_text: str) -> DesignOutput:
        """Generate and parse a project design.

        Raises:
            UpstreamError: If the completion API fails or returns no text.
        """

        logger.info("Generating project design", extra={"transcript_chars": len(transcript_text)})
        content = self._llm.chat(build_messages(transcript_text))

        output = parse_design_output(content)
        logger.info(
            "Project design parsed",
            extra={"project_name": output.project_name, "issue_count": len(output.issues)},
        )
        return output
