"""Authentication Pydantic schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class SignUpRequest(BaseModel):
    """Schema for registering a user."""
    email: str = Field(..., min_length=3, description="Login e-mail")
    password: str = Field(..., min_length=6, description="Plain-text password")
    display_name: Optional[str] = Field(None, max_length=100, description="Name shown in the user menu")


class SignInRequest(BaseModel):
    """Schema for password sign-in."""
    email: str
    password: str


class User(BaseModel):
    """Schema for user response."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    display_name: Optional[str] = None
    created_at: datetime


class SessionToken(BaseModel):
    """Schema for an issued session."""
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: User
