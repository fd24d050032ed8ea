"""Payment plan table."""

from datetime import datetime
from typing import Optional
import uuid

from sqlmodel import Field, SQLModel

from .base import created_at_field, deleted_at_field, owner_id_field, updated_at_field


class PaymentPlanRow(SQLModel, table=True):
    __tablename__ = "payment_plans"

    payment_plan_id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    name: str = Field(nullable=False, default="")
    cost: float = Field(nullable=False, default=0.0)
    currency: str = Field(nullable=False, default="")
    term: str = Field(nullable=False, default="")  # Yearly | Monthly | ...

    owner_id: uuid.UUID = owner_id_field()
    created_at: Optional[datetime] = created_at_field()
    updated_at: Optional[datetime] = updated_at_field()
    deleted_at: Optional[datetime] = deleted_at_field()
