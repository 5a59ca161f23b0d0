from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from ranchbook.schemas.common import ApiModel, UpdateModel


class UserRead(ApiModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    is_active: bool
    last_active_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(UpdateModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class RoleUpdate(BaseModel):
    # validated by change_role
    role: Any = None


class LoginRequest(ApiModel):
    id_token: str


class LoginResponse(ApiModel):
    user: UserRead
    token: str
