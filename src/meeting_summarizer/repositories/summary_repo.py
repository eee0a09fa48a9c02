"""Summary repository for database operations."""

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from meeting_summarizer.domain.errors import NotFoundError, PersistenceError
from meeting_summarizer.domain.summary_record import SummaryRecord
from meeting_summarizer.infrastructure.models import SummaryModel

logger = logging.getLogger(__name__)


def _to_domain(model: SummaryModel) -> SummaryRecord:
    return SummaryRecord(
        id=model.id,
        original_text=model.original_text,
        custom_prompt=model.custom_prompt,
        generated_summary=model.generated_summary,
        edited_summary=model.edited_summary,
        created_at=model.created_at,
    )


class SummaryRepository:
    """Repository for SummaryRecord create, read and edit operations.

    Each write commits on its own, so creates and edits are atomic
    single-record operations. Database failures surface as PersistenceError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(
        self,
        original_text: str,
        generated_summary: str,
        custom_prompt: str | None = None,
    ) -> SummaryRecord:
        """Insert a new record with a fresh id and creation timestamp."""
        model = SummaryModel(
            id=str(uuid.uuid4()),
            original_text=original_text,
            custom_prompt=custom_prompt,
            generated_summary=generated_summary,
            created_at=datetime.now(UTC),
        )
        try:
            self.session.add(model)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to save summary: {e}", exc_info=True)
            raise PersistenceError("Failed to save summary") from e

        return _to_domain(model)

    async def _get_model(self, summary_id: str) -> SummaryModel | None:
        stmt = select(SummaryModel).where(SummaryModel.id == summary_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch summary {summary_id}: {e}", exc_info=True)
            raise PersistenceError("Database error") from e
        return result.scalar_one_or_none()

    async def get_by_id(self, summary_id: str) -> SummaryRecord:
        """Get a record by id.

        Raises:
            NotFoundError: No record has this id
        """
        model = await self._get_model(summary_id)
        if model is None:
            raise NotFoundError("Summary not found")
        return _to_domain(model)

    async def list_all(self) -> list[SummaryRecord]:
        """List every record, newest first."""
        stmt = select(SummaryModel).order_by(SummaryModel.created_at.desc())
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list summaries: {e}", exc_info=True)
            raise PersistenceError("Database error") from e
        return [_to_domain(m) for m in result.scalars().all()]

    async def update_edited_summary(
        self, summary_id: str, edited_summary: str
    ) -> SummaryRecord:
        """Replace the edited summary of an existing record.

        Raises:
            NotFoundError: No record has this id
        """
        model = await self._get_model(summary_id)
        if model is None:
            raise NotFoundError("Summary not found")

        try:
            model.edited_summary = edited_summary
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to update summary {summary_id}: {e}", exc_info=True)
            raise PersistenceError("Failed to update summary") from e

        return _to_domain(model)
