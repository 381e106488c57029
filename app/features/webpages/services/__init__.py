from app.features.webpages.services.aggregate_store import AggregateStore
from app.features.webpages.services.content_resolver import ContentResolver, get_content_resolver
from app.features.webpages.services.upload_orchestrator import UploadOrchestrator
from app.features.webpages.services.upload_validation import validate_upload_request
from app.features.webpages.services.webpage_service import WebpageService

__all__ = [
    "AggregateStore",
    "ContentResolver",
    "UploadOrchestrator",
    "WebpageService",
    "get_content_resolver",
    "validate_upload_request",
]
