from sqlalchemy import Column, String

from app.platform.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"
    email = Column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
