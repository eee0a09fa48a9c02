"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SummarizeRequest(CamelModel):
    """Request schema for summary generation."""

    text: str = ""
    custom_prompt: str | None = None


class SummarizeResponse(CamelModel):
    """Response schema for summary generation."""

    id: str
    summary: str
    message: str


class EditSummaryRequest(CamelModel):
    """Request schema for a user revision."""

    edited_summary: str = ""


class MessageResponse(CamelModel):
    """Response schema carrying only a status message."""

    message: str


class SummaryRecordResponse(CamelModel):
    """Response schema for a stored summary record."""

    id: str
    original_text: str
    custom_prompt: str | None
    generated_summary: str
    edited_summary: str | None
    created_at: datetime


class SendEmailRequest(CamelModel):
    """Request schema for emailing a summary."""

    recipient_emails: list[str] = []
    subject: str | None = None
    summary: str = ""
    summary_id: str | None = None
