from app.features.auth.schemas.user import LoginResponse, SignupResponse

__all__ = ["LoginResponse", "SignupResponse"]
