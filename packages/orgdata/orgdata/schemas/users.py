from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import OwnershipMetadata
from .memberships import OrganizationMembership, TeamMembership
from .payment_plans import PaymentPlan


class User(BaseModel):
    id: uuid.UUID
    organizations: List[OrganizationMembership] = Field(default_factory=list)
    teams: List[TeamMembership] = Field(default_factory=list)
    payment_plan: Optional[PaymentPlan] = None
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}
