from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.features.auth.models.user import User


class UserService:
    """Email to user-id directory backed by the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_id_by_email(self, email: str) -> Optional[str]:
        result = await self.db.execute(select(User.id).where(User.email == email))
        return result.scalar_one_or_none()

    async def end_read(self) -> None:
        """Close the read transaction so its connection goes back to the pool."""
        if self.db.in_transaction():
            await self.db.rollback()

    async def create_user(self, email: str) -> Optional[str]:
        """
        Create a user for the given email.

        Returns:
            The new user id, or None if the email is already registered.
        """
        if await self.get_user_id_by_email(email) is not None:
            return None

        user = User(email=email)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # registered concurrently
            await self.db.rollback()
            return None
        await self.db.refresh(user)
        return user.id
