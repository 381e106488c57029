from typing import Optional

import httpx
from pydantic import BaseModel, model_validator

from app.features.analyzers.schemas.axe_core import AxeCoreResponse
from app.features.analyzers.services.base import AnalyzerClient, require_html_or_url


class HtmlOrUrlRequest(BaseModel):
    """Inline markup or a page address, never both."""
    html: Optional[str] = None
    url: Optional[str] = None

    @model_validator(mode="after")
    def check_html_xor_url(self):
        require_html_or_url("analyzer request", self.html, self.url)
        return self


class AccessibilityClient(AnalyzerClient[AxeCoreResponse]):
    """axe-core accessibility and responsiveness checks."""

    response_model = AxeCoreResponse

    async def _send(self, client: httpx.AsyncClient, payload: HtmlOrUrlRequest) -> httpx.Response:
        endpoint = f"{self.config.base_url.rstrip('/')}/analyze"
        return await client.post(endpoint, json=payload.model_dump(exclude_none=True))
