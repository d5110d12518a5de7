"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone_number: str | None = Field(default=None, max_length=30)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    remember_me: bool = Field(
        default=False, description="Issue a long lived token instead of a short one"
    )


class Token(BaseModel):
    token: str
    token_type: str = "bearer"
    user_id: str
    full_name: str
    email: EmailStr
