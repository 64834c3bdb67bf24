"""Request orchestration: transcript in, GitHub project out."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from design_bot.config import DesignBotSettings
from design_bot.errors import TranscriptValidationError
from design_bot.generation import GenerationClient
from design_bot.github.client import GitHubClient
from design_bot.llm.openai_provider import OpenAIProvider
from design_bot.provisioning import ProvisioningResult, ProvisioningService

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Repo and issues created."


class TranscriptRequest(BaseModel):
    """Inbound request body: `{"TranscriptText": "..."}`."""

    model_config = ConfigDict(extra="ignore")

    transcript_text: str | None = Field(default=None, alias="TranscriptText")

    @classmethod
    def from_body(cls, body: bytes | str) -> TranscriptRequest:
        """Deserialize and validate a raw JSON body.

        Raises:
            TranscriptValidationError: If the body is not a JSON object or the
                transcript text is missing or blank.
        """

        try:
            request = cls.model_validate_json(body)
        except PydanticValidationError as e:
            raise TranscriptValidationError("Request body cannot be deserialized") from e

        if request.transcript_text is None or not request.transcript_text.strip():
            raise TranscriptValidationError("TranscriptText cannot be null or empty.")
        return request


class DesignPipeline:
    """Runs generation then provisioning for one transcript."""

    def __init__(
        self,
        *,
        generation: GenerationClient,
        provisioning: ProvisioningService,
    ) -> None:
        self.generation = generation
        self.provisioning = provisioning

    def run(self, request: TranscriptRequest) -> ProvisioningResult:
        if request.transcript_text is None or not request.transcript_text.strip():
            raise TranscriptValidationError("TranscriptText cannot be null or empty.")

        output = self.generation.generate(request.transcript_text)
        result = self.provisioning.provision(output)
        logger.info(
            "Transcript processed",
            extra={"repo": result.repository, "issue_count": len(result.issue_numbers)},
        )
        return result

    def process(self, body: bytes | str) -> str:
        """Handle a raw inbound body and return the acknowledgement text."""

        self.run(TranscriptRequest.from_body(body))
        return SUCCESS_MESSAGE


class PipelineResources:
    """Builds a :class:`DesignPipeline` from settings and owns its clients.

    Use as a context manager so HTTP sessions are closed when the request ends.
    """

    def __init__(self, settings: DesignBotSettings) -> None:
        missing = settings.missing_credentials()
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

        self.llm = OpenAIProvider(settings)
        self.github = GitHubClient(
            token=settings.github_token,
            base_url=settings.github_base_url,
            timeout=settings.http_timeout_seconds,
        )
        self.pipeline = DesignPipeline(
            generation=GenerationClient(llm=self.llm),
            provisioning=ProvisioningService(github=self.github, settings=settings),
        )

    def close(self) -> None:
        self.llm.close()
        self.github.close()

    def __enter__(self) -> DesignPipeline:
        return self.pipeline

    def __exit__(self, *exc_info: object) -> None:
        self.close()
