from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.features.auth.dependencies import get_user_service
from app.features.auth.schemas.user import LoginResponse, SignupResponse
from app.features.auth.services.user_service import UserService
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.utils.email import validate_email_param

logger = get_logger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/signup",
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
    description="Create a user identified by email",
)
async def signup(
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
):
    validate_email_param(email)
    try:
        user_id = await user_service.create_user(email)
    except Exception as e:
        logger.error(f"Signup failed for {email}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Something went wrong"
        )

    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")

    return api_response(
        data=SignupResponse(user_id=user_id, email=email).model_dump(by_alias=True),
        message="User registered successfully",
    )


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    summary="Login user",
    description="Check that the email belongs to a registered user",
)
async def login(
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
):
    validate_email_param(email)
    try:
        user_id = await user_service.get_user_id_by_email(email)
    except Exception as e:
        logger.error(f"Login failed for {email}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Something went wrong"
        )

    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Please Sign up")

    return api_response(data=LoginResponse(email=email).model_dump(), message="Login successful")
