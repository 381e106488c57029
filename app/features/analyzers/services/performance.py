import httpx

from app.features.analyzers.schemas.page_speed import PageSpeedResponse
from app.features.analyzers.services.base import AnalyzerClient

PAGESPEED_CATEGORIES = ["performance", "accessibility", "best-practices", "seo"]


class PerformanceClient(AnalyzerClient[PageSpeedResponse]):
    """Google PageSpeed Insights. Only meaningful for publicly reachable URLs."""

    response_model = PageSpeedResponse

    async def _send(self, client: httpx.AsyncClient, payload: str) -> httpx.Response:
        params = [("url", payload)]
        if self.config.api_key:
            params.append(("key", self.config.api_key))
        params.extend(("category", category) for category in PAGESPEED_CATEGORIES)
        return await client.get(self.config.base_url, params=params)
