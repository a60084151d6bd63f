"""Pydantic DTOs for authentication."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255, examples=["admin@mozuk.net"])
    password: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    id: str
    email: str
    name: str | None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Bearer token plus the signed-in user's profile."""

    token: str
    user: UserResponse
