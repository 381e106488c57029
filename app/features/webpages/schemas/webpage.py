from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.platform.utils.file_upload import UploadedFile


class UploadRequest(BaseModel):
    """Everything the upload form carries, with files already read into memory."""
    name: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    html_file: Optional[UploadedFile] = None
    design_file: Optional[UploadedFile] = None
    specification_file: Optional[UploadedFile] = None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class WebpageSummary(_CamelModel):
    id: str
    name: Optional[str] = None
    upload_date: Optional[datetime] = None
    file_name: Optional[str] = None
    url: Optional[str] = None


class WebpageAnalysisResultOut(_CamelModel):
    id: str
    webpage_id: str
    llm_response: Optional[Dict[str, Any]] = None
    web_audit_results: Optional[Dict[str, Any]] = None
    axe_core_error: bool
    nu_validator_error: bool
    page_speed_error: bool
    llm_error: bool
    responsiveness_error: bool


class WebpageContentAndAnalysisResult(_CamelModel):
    html_content: str
    webpage_analysis_result: WebpageAnalysisResultOut


class SpecificationContent(BaseModel):
    content: str
