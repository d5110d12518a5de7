"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRead(BaseModel):
    id: str
    full_name: str
    email: EmailStr
    phone_number: str | None
    profile_image: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ProfileImageUpdate(BaseModel):
    profile_image: str = Field(..., min_length=1, description="URL or storage key of the image")

    model_config = ConfigDict(extra="forbid")
