"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr


class UserRead(BaseModel):
    id: int
    email: EmailStr
    username: str
    is_admin: bool
    is_deleted: bool
    created_at: datetime | None
    notification_ids: list[int]

    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    message: str
    user: UserRead
