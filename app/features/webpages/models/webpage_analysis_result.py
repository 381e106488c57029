from sqlalchemy import JSON, Boolean, Column, ForeignKey, String

from app.platform.db.base import BaseModel


class WebpageAnalysisResult(BaseModel):
    __tablename__ = "webpage_analysis_results"

    webpage_id = Column(
        String, ForeignKey("webpages.id"), unique=True, index=True, nullable=False
    )
    llm_response = Column(JSON, nullable=True)
    web_audit_results = Column(JSON, nullable=True)

    # True marks the dimension as a failure placeholder
    axe_core_error = Column(Boolean, default=False, nullable=False)
    nu_validator_error = Column(Boolean, default=False, nullable=False)
    page_speed_error = Column(Boolean, default=False, nullable=False)
    llm_error = Column(Boolean, default=False, nullable=False)
    responsiveness_error = Column(Boolean, default=False, nullable=False)
