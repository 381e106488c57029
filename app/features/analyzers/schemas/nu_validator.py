from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NuValidatorMessage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str = ""
    last_line: int = 0
    last_column: int = 0
    first_column: int = 0
    message: str = ""
    extract: str = ""
    hilite_start: int = 0
    hilite_length: int = 0


class NuValidatorResponse(BaseModel):
    messages: List[NuValidatorMessage] = Field(default_factory=list)
