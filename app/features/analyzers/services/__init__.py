from app.features.analyzers.services.accessibility import AccessibilityClient, HtmlOrUrlRequest
from app.features.analyzers.services.base import AnalyzerClient
from app.features.analyzers.services.llm_review import (
    DesignAttachment,
    LLMReviewClient,
    LLMReviewRequest,
)
from app.features.analyzers.services.performance import PerformanceClient
from app.features.analyzers.services.validation import ValidationClient

__all__ = [
    "AccessibilityClient",
    "AnalyzerClient",
    "DesignAttachment",
    "HtmlOrUrlRequest",
    "LLMReviewClient",
    "LLMReviewRequest",
    "PerformanceClient",
    "ValidationClient",
]
