from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.auth.services.user_service import UserService
from app.platform.db.session import get_db


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)
