from typing import Optional

from fastapi import HTTPException, status
from pydantic import EmailStr, TypeAdapter, ValidationError

from app.platform.config import settings

_email_adapter = TypeAdapter(EmailStr)


def is_valid_email(email: Optional[str]) -> bool:
    """Check an address against the RFC syntax rules used by pydantic's EmailStr."""
    if not email or not email.strip():
        return False
    try:
        _email_adapter.validate_python(email)
    except ValidationError:
        return False
    return True


def validate_email_param(email: Optional[str]) -> str:
    """Shared by every route that takes ?email=."""
    if not email or not email.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")
    if len(email) > settings.MAX_EMAIL_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Email must be at most {settings.MAX_EMAIL_LENGTH} characters",
        )
    if not is_valid_email(email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email")
    return email
