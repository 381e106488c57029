import httpx

from app.features.analyzers.schemas.nu_validator import NuValidatorResponse
from app.features.analyzers.services.accessibility import HtmlOrUrlRequest
from app.features.analyzers.services.base import AnalyzerClient


class ValidationClient(AnalyzerClient[NuValidatorResponse]):
    """Nu HTML Checker, JSON output."""

    response_model = NuValidatorResponse

    async def _send(self, client: httpx.AsyncClient, payload: HtmlOrUrlRequest) -> httpx.Response:
        if payload.url is not None:
            return await client.get(
                self.config.base_url, params={"doc": payload.url, "out": "json"}
            )
        return await client.post(
            self.config.base_url,
            params={"out": "json"},
            content=payload.html.encode("utf-8"),
            headers={"Content-Type": "text/html; charset=utf-8"},
        )
