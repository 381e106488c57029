from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult

__all__ = ["Webpage", "WebpageAnalysisResult"]
