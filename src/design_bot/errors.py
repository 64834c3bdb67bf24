"""Error taxonomy for the transcript -> repository pipeline."""

from __future__ import annotations


class DesignBotError(Exception):
    """Base class for errors raised by design-bot."""


class TranscriptValidationError(DesignBotError):
    """Raised when the inbound body is malformed or carries no transcript text."""


class UpstreamError(DesignBotError):
    """Raised when the completion API fails or returns an unexpected shape."""


class ProvisioningError(DesignBotError):
    """Raised when a GitHub mutation fails.

    Nothing is rolled back: resources created before the failing step remain,
    and `created_issue_numbers` lists the issues already filed.
    """

    def __init__(
        self,
        *,
        step: str,
        repository: str,
        reason: str,
        created_issue_numbers: tuple[int, ...] = (),
    ) -> None:
        super().__init__(f"Provisioning failed at step {step!r} for {repository!r}: {reason}")
        self.step = step
        self.repository = repository
        self.reason = reason
        self.created_issue_numbers = created_issue_numbers
