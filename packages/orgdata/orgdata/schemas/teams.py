from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import OrganizationRef, OwnershipMetadata, PaymentPlanRef
from .memberships import TeamMembership


class Team(BaseModel):
    id: uuid.UUID
    organization: Optional[OrganizationRef] = None
    users: List[TeamMembership] = Field(default_factory=list)
    name: str = ""
    capacity: int = Field(default=0, ge=0)  # Maximum number of users. 0 = no limit.
    payment_plan: Optional[PaymentPlanRef] = None
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}

    @property
    def is_unlimited(self) -> bool:
        return self.capacity == 0
