from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from .common import OwnershipMetadata


class PaymentPlan(BaseModel):
    id: uuid.UUID
    name: str = ""
    cost: float = 0.0
    currency: str = ""
    term: str = ""  # Yearly | Monthly | ...
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}
