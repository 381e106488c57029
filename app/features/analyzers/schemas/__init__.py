from app.features.analyzers.schemas.audit import WebAuditResults
from app.features.analyzers.schemas.axe_core import (
    AxeCoreResponse,
    AxeCoreViolation,
    ResponsivenessMetrics,
)
from app.features.analyzers.schemas.llm import LLMResponse
from app.features.analyzers.schemas.nu_validator import NuValidatorMessage, NuValidatorResponse
from app.features.analyzers.schemas.page_speed import PageSpeedResponse
from app.features.analyzers.schemas.result import (
    AnalyzerConfig,
    AnalyzerFailure,
    AnalyzerResult,
    AnalyzerSuccess,
)

__all__ = [
    "AnalyzerConfig",
    "AnalyzerFailure",
    "AnalyzerResult",
    "AnalyzerSuccess",
    "AxeCoreResponse",
    "AxeCoreViolation",
    "LLMResponse",
    "NuValidatorMessage",
    "NuValidatorResponse",
    "PageSpeedResponse",
    "ResponsivenessMetrics",
    "WebAuditResults",
]
