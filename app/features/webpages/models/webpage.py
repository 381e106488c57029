from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String

from app.platform.db.base import BaseModel


class Webpage(BaseModel):
    """
    An analysed page. The HTML itself lives in the file store and is
    referenced by html_content_id; exactly one of url / file_name says
    where it came from.
    """
    __tablename__ = "webpages"

    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    html_content_id = Column(String, nullable=False)
    url = Column(String(2000), nullable=True)
    file_name = Column(String, nullable=True)
    name = Column(String(100), nullable=True)
    design_file_id = Column(String, nullable=True)
    specification_file_id = Column(String, nullable=True)
    upload_date = Column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )

    def __repr__(self):
        return f"<Webpage(id={self.id}, user_id={self.user_id}, name={self.name})>"
