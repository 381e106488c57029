from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Distribution(BaseModel):
    min: int = 0
    max: Optional[int] = None
    proportion: float = 0.0


class MetricModel(BaseModel):
    percentile: int = 0
    distributions: List[Distribution] = Field(default_factory=list)
    category: str = ""


class LoadingExperience(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # CUMULATIVE_LAYOUT_SHIFT_SCORE, FIRST_CONTENTFUL_PAINT_MS, LARGEST_CONTENTFUL_PAINT_MS, ...
    metrics: Dict[str, MetricModel] = Field(default_factory=dict)
    overall_category: str = ""


class CategoryScore(BaseModel):
    # PageSpeed returns null scores for categories it could not compute
    score: Optional[float] = None


class LighthouseCategories(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    performance: CategoryScore = Field(default_factory=CategoryScore)
    seo: CategoryScore = Field(default_factory=CategoryScore)
    best_practices: CategoryScore = Field(default_factory=CategoryScore, alias="best-practices")
    accessibility: CategoryScore = Field(default_factory=CategoryScore)


class LighthouseResult(BaseModel):
    categories: LighthouseCategories = Field(default_factory=LighthouseCategories)


class PageSpeedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    loading_experience: LoadingExperience = Field(
        default_factory=LoadingExperience, alias="loadingExperience"
    )
    lighthouse_result: LighthouseResult = Field(
        default_factory=LighthouseResult, alias="lighthouseResult"
    )
