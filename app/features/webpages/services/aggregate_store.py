from sqlalchemy.ext.asyncio import AsyncSession

from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult
from app.platform.logger import get_logger

logger = get_logger(__name__)


class AggregateStore:
    """Writes a webpage and its analysis result in one transaction."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def commit(self, webpage: Webpage, analysis_result: WebpageAnalysisResult) -> str:
        """
        Insert the webpage, then the analysis result pointing at it.
        Either both rows are committed or neither is; errors propagate.

        Returns:
            The generated webpage id
        """
        try:
            self.db.add(webpage)
            # assigns webpage.id before the result references it
            await self.db.flush()

            analysis_result.webpage_id = webpage.id
            self.db.add(analysis_result)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to save webpage and analysis result: {e}", exc_info=True)
            raise

        logger.info(f"Saved webpage {webpage.id} with analysis result {analysis_result.id}")
        return webpage.id
