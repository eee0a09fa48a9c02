"""Error taxonomy for summarization, persistence and distribution."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meeting_summarizer.domain.delivery import DeliveryResult


class SummarizerError(Exception):
    """Base class for all application errors."""


class ValidationError(SummarizerError):
    """A required request field is missing or empty."""


class RemoteServiceError(SummarizerError):
    """The remote summarization service failed or returned an unusable response.

    Always absorbed by the orchestrator, which falls back to the local pipeline.
    """


class PersistenceError(SummarizerError):
    """A summary record could not be created, read or updated."""


class NotFoundError(SummarizerError):
    """The referenced summary record does not exist."""


class DistributionError(SummarizerError):
    """One or more recipients could not be sent the summary."""

    def __init__(self, message: str, results: list[DeliveryResult]) -> None:
        super().__init__(message)
        self.results = results

    @property
    def failed_recipients(self) -> list[str]:
        return [r.recipient for r in self.results if not r.delivered]
