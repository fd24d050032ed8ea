"""Organization table."""

from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from .base import created_at_field, deleted_at_field, owner_id_field, updated_at_field


class OrganizationRow(SQLModel, table=True):
    __tablename__ = "organizations"

    organization_id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    payment_plan_id: Optional[uuid.UUID] = Field(default=None, foreign_key="payment_plans.payment_plan_id")

    owner_id: uuid.UUID = owner_id_field()
    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()
