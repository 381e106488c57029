from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SignupResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    email: str


class LoginResponse(BaseModel):
    email: str
