"""Summary record domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

SummarySource = Literal["remote", "local"]


@dataclass
class SummaryRecord:
    """A generated meeting summary and its optional user revision.

    Everything except ``edited_summary`` is fixed when the record is created.
    """

    id: str
    original_text: str
    custom_prompt: str | None
    generated_summary: str
    created_at: datetime
    edited_summary: str | None = None


@dataclass(frozen=True)
class GeneratedSummary:
    """Summary text together with the tier that produced it."""

    text: str
    source: SummarySource
