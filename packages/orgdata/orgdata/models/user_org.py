"""User-Organization membership (join table)."""

from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from .base import created_at_field, deleted_at_field, owner_id_field, updated_at_field


class UserOrganizationJoin(SQLModel, table=True):
    __tablename__ = "user_organization_join"

    organization_id: uuid.UUID = Field(foreign_key="organizations.organization_id", primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.user_id", primary_key=True)
    user_role: str = Field(nullable=False, default="user")

    owner_id: uuid.UUID = owner_id_field()
    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()
