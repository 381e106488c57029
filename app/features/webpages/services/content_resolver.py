from typing import Optional

import httpx
from fastapi import HTTPException, status

from app.platform.config import settings
from app.platform.logger import get_logger
from app.platform.utils.file_upload import UploadedFile

logger = get_logger(__name__)


class ContentResolver:
    """Turns an uploaded HTML file or a URL into page markup."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout_seconds = timeout_seconds or settings.URL_FETCH_TIMEOUT_SECONDS
        self._transport = transport

    async def resolve(
        self, html_file: Optional[UploadedFile] = None, url: Optional[str] = None
    ) -> str:
        if html_file is not None:
            return html_file.data.decode("utf-8", errors="replace")
        if url is not None:
            return await self.fetch(url)
        raise ValueError("ContentResolver needs an HTML file or a URL")

    async def fetch(self, url: str) -> str:
        """
        Raises:
            HTTPException(400): for any fetch failure, without transport detail
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid or broken URL"
            )


def get_content_resolver() -> ContentResolver:
    return ContentResolver()
