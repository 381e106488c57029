from app.features.webpages.schemas.webpage import (
    SpecificationContent,
    UploadRequest,
    WebpageAnalysisResultOut,
    WebpageContentAndAnalysisResult,
    WebpageSummary,
)

__all__ = [
    "SpecificationContent",
    "UploadRequest",
    "WebpageAnalysisResultOut",
    "WebpageContentAndAnalysisResult",
    "WebpageSummary",
]
