"""Two-tier summarization: remote service first, local extractive fallback."""

import logging

from meeting_summarizer.domain.errors import ValidationError
from meeting_summarizer.domain.summary_record import GeneratedSummary, SummaryRecord
from meeting_summarizer.infrastructure.metrics import CSVLogger, timed
from meeting_summarizer.infrastructure.remote import RemoteSummarizer
from meeting_summarizer.repositories.summary_repo import SummaryRepository
from meeting_summarizer.services.extractive import ExtractiveSummarizer

logger = logging.getLogger(__name__)


class SummarizationOrchestrator:
    """Generates a summary for a transcript and records it.

    The remote tier is attempted only when a remote client is supplied. Any
    remote failure is logged and absorbed; the local extractive pipeline then
    produces the summary. Only validation and persistence errors reach the
    caller.
    """

    def __init__(
        self,
        repository: SummaryRepository,
        remote: RemoteSummarizer | None = None,
        extractive: ExtractiveSummarizer | None = None,
        metrics: CSVLogger | None = None,
    ) -> None:
        self.repository = repository
        self.remote = remote
        self.extractive = extractive or ExtractiveSummarizer()
        self.metrics = metrics

    async def _try_remote(self, text: str, custom_prompt: str | None) -> str | None:
        if self.remote is None:
            return None

        with timed(self.metrics, "remote_summarize", len(text)) as state:
            try:
                return await self.remote.summarize(text, custom_prompt)
            except Exception as e:
                state["outcome"] = "failed"
                logger.warning(
                    f"Remote summarization via {self.remote.name} failed, "
                    f"using local summarization: {e}"
                )
                return None

    async def summarize(
        self, text: str, custom_prompt: str | None = None
    ) -> GeneratedSummary:
        """Produce summary text without persisting it."""
        summary = await self._try_remote(text, custom_prompt)
        if summary:
            return GeneratedSummary(text=summary, source="remote")

        with timed(self.metrics, "local_summarize", len(text)):
            summary = self.extractive.summarize(text, custom_prompt)
        return GeneratedSummary(text=summary, source="local")

    async def generate(
        self, text: str, custom_prompt: str | None = None
    ) -> tuple[SummaryRecord, GeneratedSummary]:
        """Summarize a transcript and persist a new record.

        Raises:
            ValidationError: The transcript is empty or whitespace-only
            PersistenceError: The record could not be saved
        """
        if not text or not text.strip():
            raise ValidationError("Text is required")

        custom_prompt = custom_prompt or None
        generated = await self.summarize(text, custom_prompt)
        record = await self.repository.create(
            original_text=text,
            custom_prompt=custom_prompt,
            generated_summary=generated.text,
        )
        logger.info(f"Created summary {record.id} ({generated.source})")
        return record, generated
