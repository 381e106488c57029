import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.features.auth.models.user import User
from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult
from app.features.webpages.services.aggregate_store import AggregateStore
from app.platform.db.session import SessionLocal


async def _user_id(db, email):
    user = User(email=email)
    db.add(user)
    await db.commit()
    return user.id


def _webpage(user_id, name):
    return Webpage(user_id=user_id, html_content_id="html-1", url="https://example.com", name=name)


async def _count(model, **filters):
    async with SessionLocal() as session:
        query = select(func.count()).select_from(model)
        for column, value in filters.items():
            query = query.where(getattr(model, column) == value)
        return (await session.execute(query)).scalar_one()


class TestAggregateStore:
    """Webpage and analysis result are written together or not at all"""

    @pytest.mark.asyncio
    async def test_commit_links_result_to_webpage(self, db_session):
        user_id = await _user_id(db_session, "aggregate-ok@example.com")
        webpage = _webpage(user_id, "committed")
        result = WebpageAnalysisResult(web_audit_results={"axeCoreResult": []}, llm_error=True)

        webpage_id = await AggregateStore(db_session).commit(webpage, result)

        assert webpage_id == webpage.id
        assert result.webpage_id == webpage_id
        stored = await _count(WebpageAnalysisResult, webpage_id=webpage_id)
        assert stored == 1

    @pytest.mark.asyncio
    async def test_failed_result_insert_rolls_back_webpage(self, db_session):
        user_id = await _user_id(db_session, "aggregate-fail@example.com")
        webpage = _webpage(user_id, "rolled back")
        # NOT NULL violation on the second insert
        result = WebpageAnalysisResult(axe_core_error=None)

        with pytest.raises(IntegrityError):
            await AggregateStore(db_session).commit(webpage, result)

        assert await _count(Webpage, user_id=user_id) == 0
