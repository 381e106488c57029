from typing import Optional

import httpx
from pydantic import BaseModel

from app.features.analyzers.schemas.audit import WebAuditResults
from app.features.analyzers.schemas.llm import LLMResponse
from app.features.analyzers.services.base import AnalyzerClient


class DesignAttachment(BaseModel):
    filename: str
    content_type: str
    data: bytes


class LLMReviewRequest(BaseModel):
    html: str
    specification: Optional[str] = None
    design_file: Optional[DesignAttachment] = None
    audit_results: WebAuditResults


class LLMReviewClient(AnalyzerClient[LLMResponse]):
    """
    LLM review of the page against its specification and design mock-up.
    The non-LLM audit bundle is sent along as JSON so the review can
    summarize it.
    """

    response_model = LLMResponse

    async def _send(self, client: httpx.AsyncClient, payload: LLMReviewRequest) -> httpx.Response:
        # (None, value) parts keep the body multipart even without a design file
        parts = [
            ("html", (None, payload.html)),
            ("auditResults", (None, payload.audit_results.model_dump_json(by_alias=True))),
        ]
        if payload.specification is not None:
            parts.append(("specification", (None, payload.specification)))
        if payload.design_file is not None:
            design = payload.design_file
            parts.append(("designFile", (design.filename, design.data, design.content_type)))

        endpoint = f"{self.config.base_url.rstrip('/')}/analyze"
        return await client.post(endpoint, files=parts)
