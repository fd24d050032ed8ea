"""Team table and the User-Team membership join table."""

from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from .base import created_at_field, deleted_at_field, owner_id_field, updated_at_field


class TeamRow(SQLModel, table=True):
    __tablename__ = "teams"

    team_id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    organization_id: Optional[uuid.UUID] = Field(default=None, foreign_key="organizations.organization_id")
    name: str = Field(nullable=False, default="")
    capacity: int = Field(nullable=False, default=0)  # 0 = no limit
    payment_plan_id: Optional[uuid.UUID] = Field(default=None, foreign_key="payment_plans.payment_plan_id")

    owner_id: uuid.UUID = owner_id_field()
    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()


class UserTeamJoin(SQLModel, table=True):
    __tablename__ = "user_team_join"

    team_id: uuid.UUID = Field(foreign_key="teams.team_id", primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.user_id", primary_key=True)
    user_role: str = Field(nullable=False, default="user")

    owner_id: uuid.UUID = owner_id_field()
    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()
