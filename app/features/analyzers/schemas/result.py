from typing import Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class AnalyzerConfig(BaseModel):
    """Connection settings handed to each analyzer client at construction."""
    name: str
    base_url: str
    timeout_seconds: float = 30.0
    api_key: Optional[str] = None


class AnalyzerSuccess(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    analyzer: str
    payload: T


class AnalyzerFailure(BaseModel):
    status: Literal["failure"] = "failure"
    analyzer: str
    reason: str


AnalyzerResult = Union[AnalyzerSuccess, AnalyzerFailure]
