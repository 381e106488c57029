from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AxeCoreNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    impact: Optional[str] = Field(default=None, alias="Impact")
    html: Optional[str] = Field(default=None, alias="Html")
    failure_summary: Optional[str] = Field(default=None, alias="FailureSummary")


class AxeCoreViolation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="Id")
    description: Optional[str] = Field(default=None, alias="Description")
    help: Optional[str] = Field(default=None, alias="Help")
    nodes: List[AxeCoreNode] = Field(default_factory=list, alias="Nodes")


class ResponsivenessMetrics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    viewport: Optional[str] = Field(default=None, alias="Viewport")
    overflow: Optional[bool] = Field(default=None, alias="Overflow")
    images_oversize: Optional[bool] = Field(default=None, alias="ImagesOversize")


class AxeCoreResponse(BaseModel):
    """Body returned by the accessibility service."""
    model_config = ConfigDict(populate_by_name=True)

    violations: List[AxeCoreViolation] = Field(default_factory=list)
    responsiveness_results: List[ResponsivenessMetrics] = Field(
        default_factory=list, alias="responsivenessResults"
    )
