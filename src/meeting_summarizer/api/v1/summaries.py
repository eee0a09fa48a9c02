"""Summary API endpoints."""

from fastapi import APIRouter

from meeting_summarizer.api.dependencies import OrchestratorDep, SummaryRepoDep
from meeting_summarizer.api.v1.schemas import (
    EditSummaryRequest,
    MessageResponse,
    SummarizeRequest,
    SummarizeResponse,
    SummaryRecordResponse,
)
from meeting_summarizer.domain.errors import ValidationError

router = APIRouter(tags=["summaries"])


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    request: SummarizeRequest,
    orchestrator: OrchestratorDep,
) -> SummarizeResponse:
    """Generate and store a summary of a meeting transcript."""
    record, generated = await orchestrator.generate(request.text, request.custom_prompt)

    message = "Summary generated successfully"
    if generated.source == "local":
        message += " (local summarization)"

    return SummarizeResponse(id=record.id, summary=generated.text, message=message)


@router.get("/summaries", response_model=list[SummaryRecordResponse])
async def list_summaries(summary_repo: SummaryRepoDep) -> list[SummaryRecordResponse]:
    """List all summaries, newest first."""
    records = await summary_repo.list_all()
    return [SummaryRecordResponse.model_validate(r) for r in records]


@router.get("/summaries/{summary_id}", response_model=SummaryRecordResponse)
async def get_summary(
    summary_id: str,
    summary_repo: SummaryRepoDep,
) -> SummaryRecordResponse:
    """Get a single summary by ID."""
    record = await summary_repo.get_by_id(summary_id)
    return SummaryRecordResponse.model_validate(record)


@router.put("/summaries/{summary_id}", response_model=MessageResponse)
async def edit_summary(
    summary_id: str,
    request: EditSummaryRequest,
    summary_repo: SummaryRepoDep,
) -> MessageResponse:
    """Replace the user-edited version of a summary."""
    if not request.edited_summary or not request.edited_summary.strip():
        raise ValidationError("Edited summary is required")

    await summary_repo.update_edited_summary(summary_id, request.edited_summary)
    return MessageResponse(message="Summary updated successfully")
