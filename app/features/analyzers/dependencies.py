from app.features.analyzers.schemas.result import AnalyzerConfig
from app.features.analyzers.services.accessibility import AccessibilityClient
from app.features.analyzers.services.llm_review import LLMReviewClient
from app.features.analyzers.services.performance import PerformanceClient
from app.features.analyzers.services.validation import ValidationClient
from app.platform.config import settings


def get_accessibility_client() -> AccessibilityClient:
    return AccessibilityClient(
        AnalyzerConfig(
            name="accessibility",
            base_url=settings.ACCESSIBILITY_API_URL,
            timeout_seconds=settings.ACCESSIBILITY_TIMEOUT_SECONDS,
        )
    )


def get_performance_client() -> PerformanceClient:
    return PerformanceClient(
        AnalyzerConfig(
            name="performance",
            base_url=settings.PAGESPEED_API_URL,
            timeout_seconds=settings.PERFORMANCE_TIMEOUT_SECONDS,
            api_key=settings.PAGESPEED_API_KEY,
        )
    )


def get_validation_client() -> ValidationClient:
    return ValidationClient(
        AnalyzerConfig(
            name="validation",
            base_url=settings.NU_VALIDATOR_URL,
            timeout_seconds=settings.VALIDATION_TIMEOUT_SECONDS,
        )
    )


def get_llm_review_client() -> LLMReviewClient:
    return LLMReviewClient(
        AnalyzerConfig(
            name="llm",
            base_url=settings.LLM_API_URL,
            timeout_seconds=settings.LLM_TIMEOUT_SECONDS,
        )
    )
