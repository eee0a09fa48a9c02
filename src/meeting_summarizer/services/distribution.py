"""Fan-out of a finalized summary to email recipients."""

import logging
from typing import Protocol

from meeting_summarizer.domain.delivery import DeliveryResult
from meeting_summarizer.domain.errors import DistributionError, ValidationError
from meeting_summarizer.infrastructure.metrics import CSVLogger, timed

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    async def send_all(
        self, recipients: list[str], subject: str, summary: str
    ) -> list[DeliveryResult]: ...


class DistributionService:
    """Sends one summary to many recipients with all-or-nothing reporting."""

    def __init__(
        self,
        mailer: Mailer,
        default_subject: str,
        metrics: CSVLogger | None = None,
    ) -> None:
        self.mailer = mailer
        self.default_subject = default_subject
        self.metrics = metrics

    async def distribute(
        self,
        recipients: list[str],
        summary: str,
        subject: str | None = None,
    ) -> list[DeliveryResult]:
        """Send the summary to every recipient.

        All recipients are attempted even after a failure, so some messages
        may already be delivered when DistributionError is raised. The
        per-recipient outcome is on the error's ``results``.

        Raises:
            ValidationError: No recipients or an empty summary
            DistributionError: At least one send failed
        """
        recipients = [r.strip() for r in recipients if r and r.strip()]
        if not recipients:
            raise ValidationError("Recipient emails are required")
        if not summary or not summary.strip():
            raise ValidationError("Summary content is required")

        with timed(self.metrics, "send_email", len(summary)) as state:
            results = await self.mailer.send_all(
                recipients, subject or self.default_subject, summary
            )
            failed = [r for r in results if not r.delivered]
            if failed:
                state["outcome"] = "failed"

        if failed:
            logger.error(
                f"Summary delivery failed for {len(failed)}/{len(results)} recipients"
            )
            raise DistributionError("Failed to send email", results)

        logger.info(f"Summary sent to {len(results)} recipients")
        return results
