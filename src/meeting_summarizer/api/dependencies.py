"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from meeting_summarizer.config import get_settings
from meeting_summarizer.infrastructure.database import get_session
from meeting_summarizer.infrastructure.mailer import SMTPMailer
from meeting_summarizer.infrastructure.metrics import get_metrics_logger
from meeting_summarizer.infrastructure.remote import RemoteSummarizer
from meeting_summarizer.repositories.summary_repo import SummaryRepository
from meeting_summarizer.services.distribution import DistributionService
from meeting_summarizer.services.summarizer import SummarizationOrchestrator

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_summary_repository(
    session: SessionDep,
) -> AsyncGenerator[SummaryRepository, None]:
    """Provide SummaryRepository instance."""
    yield SummaryRepository(session)


def get_remote_summarizer(request: Request) -> RemoteSummarizer | None:
    """Provide the shared remote client built at startup, None for local-only mode."""
    return getattr(request.app.state, "remote_summarizer", None)


SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]
RemoteDep = Annotated[RemoteSummarizer | None, Depends(get_remote_summarizer)]


def get_orchestrator(
    repository: SummaryRepoDep,
    remote: RemoteDep,
) -> SummarizationOrchestrator:
    """Provide SummarizationOrchestrator instance."""
    return SummarizationOrchestrator(
        repository=repository,
        remote=remote,
        metrics=get_metrics_logger(),
    )


def get_distribution_service() -> DistributionService:
    """Provide DistributionService backed by SMTP."""
    settings = get_settings()
    return DistributionService(
        mailer=SMTPMailer.from_settings(settings),
        default_subject=settings.default_email_subject,
        metrics=get_metrics_logger(),
    )


# Type aliases for commonly used dependencies
OrchestratorDep = Annotated[SummarizationOrchestrator, Depends(get_orchestrator)]
DistributionDep = Annotated[DistributionService, Depends(get_distribution_service)]
