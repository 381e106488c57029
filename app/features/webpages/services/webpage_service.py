import mimetypes
from typing import List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult
from app.features.webpages.schemas.webpage import (
    SpecificationContent,
    WebpageAnalysisResultOut,
    WebpageContentAndAnalysisResult,
    WebpageSummary,
)
from app.features.webpages.services.specification import extract_specification_text_async
from app.platform.storage.file_store import FileStore, StoredFile


class WebpageService:
    """Read side of stored webpages, always scoped to the owning user."""

    def __init__(self, db: AsyncSession, file_store: FileStore):
        self.db = db
        self.file_store = file_store

    async def list_webpages(self, user_id: str) -> List[WebpageSummary]:
        result = await self.db.execute(
            select(Webpage).where(Webpage.user_id == user_id).order_by(Webpage.upload_date.desc())
        )
        return [WebpageSummary.model_validate(webpage) for webpage in result.scalars().all()]

    async def get_webpage(self, webpage_id: str, user_id: str) -> Optional[Webpage]:
        result = await self.db.execute(
            select(Webpage).where(Webpage.id == webpage_id, Webpage.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_content_and_analysis(
        self, webpage_id: str, user_id: str
    ) -> WebpageContentAndAnalysisResult:
        not_found = HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Webpage or HTML content not found"
        )

        webpage = await self.get_webpage(webpage_id, user_id)
        if webpage is None:
            raise not_found

        result = await self.db.execute(
            select(WebpageAnalysisResult).where(WebpageAnalysisResult.webpage_id == webpage.id)
        )
        analysis_result = result.scalar_one_or_none()
        html = await self.file_store.get(webpage.html_content_id)
        if analysis_result is None or html is None:
            raise not_found

        return WebpageContentAndAnalysisResult(
            html_content=html.data.decode("utf-8", errors="replace"),
            webpage_analysis_result=WebpageAnalysisResultOut.model_validate(analysis_result),
        )

    async def get_design_file(self, webpage_id: str, user_id: str) -> Tuple[StoredFile, str]:
        """
        Returns:
            The stored design file and the content type inferred from its name
        """
        webpage = await self._require_webpage(webpage_id, user_id)
        stored = await self._stored_file(webpage.design_file_id, "Design File was not uploaded.")
        content_type = mimetypes.guess_type(stored.filename)[0] or "application/octet-stream"
        return stored, content_type

    async def get_specification(self, webpage_id: str, user_id: str) -> SpecificationContent:
        webpage = await self._require_webpage(webpage_id, user_id)
        stored = await self._stored_file(
            webpage.specification_file_id, "Specification File was not uploaded."
        )
        content = await extract_specification_text_async(stored.filename, stored.data)
        return SpecificationContent(content=content)

    async def _require_webpage(self, webpage_id: str, user_id: str) -> Webpage:
        webpage = await self.get_webpage(webpage_id, user_id)
        if webpage is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Webpage not found")
        return webpage

    async def _stored_file(self, file_id: Optional[str], missing_detail: str) -> StoredFile:
        stored = await self.file_store.get(file_id) if file_id else None
        if stored is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=missing_detail)
        return stored
