from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.analyzers.dependencies import (
    get_accessibility_client,
    get_llm_review_client,
    get_performance_client,
    get_validation_client,
)
from app.features.analyzers.services import (
    AccessibilityClient,
    LLMReviewClient,
    PerformanceClient,
    ValidationClient,
)
from app.features.auth.services.user_service import UserService
from app.features.webpages.services.aggregate_store import AggregateStore
from app.features.webpages.services.content_resolver import ContentResolver, get_content_resolver
from app.features.webpages.services.upload_orchestrator import UploadOrchestrator
from app.features.webpages.services.webpage_service import WebpageService
from app.platform.db.session import get_db
from app.platform.storage.file_store import FileStore, get_file_store


def get_webpage_service(
    db: AsyncSession = Depends(get_db),
    file_store: FileStore = Depends(get_file_store),
) -> WebpageService:
    return WebpageService(db, file_store)


def get_upload_orchestrator(
    db: AsyncSession = Depends(get_db),
    file_store: FileStore = Depends(get_file_store),
    content_resolver: ContentResolver = Depends(get_content_resolver),
    accessibility: AccessibilityClient = Depends(get_accessibility_client),
    performance: PerformanceClient = Depends(get_performance_client),
    validation: ValidationClient = Depends(get_validation_client),
    llm_review: LLMReviewClient = Depends(get_llm_review_client),
) -> UploadOrchestrator:
    return UploadOrchestrator(
        user_service=UserService(db),
        file_store=file_store,
        aggregate_store=AggregateStore(db),
        content_resolver=content_resolver,
        accessibility=accessibility,
        performance=performance,
        validation=validation,
        llm_review=llm_review,
    )
