"""Authentication endpoints — login and current user."""

from fastapi import APIRouter, Depends, HTTPException, status

from mozuk.application.schemas.auth import LoginRequest, LoginResponse, UserResponse
from mozuk.application.services import AuthService
from mozuk.domain.entities import User
from mozuk.domain.exceptions import AuthenticationError
from mozuk.infrastructure.dependencies import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    try:
        token, user = await service.login(data.email, data.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return LoginResponse(
        token=token,
        user=UserResponse.model_validate(user, from_attributes=True),
    )


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """Return the profile of the signed-in user."""
    return UserResponse.model_validate(current_user, from_attributes=True)
