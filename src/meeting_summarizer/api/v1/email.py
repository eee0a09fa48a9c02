"""Email distribution endpoint."""

import logging

from fastapi import APIRouter

from meeting_summarizer.api.dependencies import DistributionDep
from meeting_summarizer.api.v1.schemas import MessageResponse, SendEmailRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["email"])


@router.post("/send-email", response_model=MessageResponse)
async def send_email(
    request: SendEmailRequest,
    distribution: DistributionDep,
) -> MessageResponse:
    """Email a summary to every recipient.

    Reports a single failure if any recipient could not be sent to.
    """
    if request.summary_id:
        logger.info(f"Sending summary {request.summary_id}")

    await distribution.distribute(
        request.recipient_emails,
        request.summary,
        subject=request.subject,
    )
    return MessageResponse(message="Emails sent successfully")
