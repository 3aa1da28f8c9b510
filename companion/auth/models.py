"""Authenticated user models"""
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class CurrentUser(BaseModel):
    """User extracted from a verified backend access token"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(..., alias="sub")
    email: Optional[str] = None
    name: Optional[str] = None
    roles: list[str] = []
    permissions: list[str] = []
    created_at: Optional[datetime] = None
    iat: Optional[datetime] = None
    exp: Optional[datetime] = None
