from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import OwnershipMetadata
from .memberships import OrganizationMembership
from .payment_plans import PaymentPlan
from .teams import Team


class Organization(BaseModel):
    """An organization with its member users embedded as membership rows."""

    id: uuid.UUID
    users: List[OrganizationMembership] = Field(default_factory=list)
    teams: List[Team] = Field(default_factory=list)
    payment_plan: Optional[PaymentPlan] = None
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}
