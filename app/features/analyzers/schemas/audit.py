from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.features.analyzers.schemas.axe_core import AxeCoreViolation, ResponsivenessMetrics
from app.features.analyzers.schemas.nu_validator import NuValidatorMessage
from app.features.analyzers.schemas.page_speed import PageSpeedResponse


class WebAuditResults(BaseModel):
    """
    Raw output of the non-LLM analyzers, embedded in the analysis result
    and sent to the LLM as context. A None field means the analyzer failed
    or did not apply.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    axe_core_result: Optional[List[AxeCoreViolation]] = None
    page_speed_result: Optional[PageSpeedResponse] = None
    nu_validator_result: Optional[List[NuValidatorMessage]] = None
    responsiveness_result: Optional[List[ResponsivenessMetrics]] = None
