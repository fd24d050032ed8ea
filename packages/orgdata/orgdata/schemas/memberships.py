"""Join-table memberships linking users to organizations and teams."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from .common import OwnershipMetadata


class OrganizationMembership(BaseModel):
    user_id: uuid.UUID
    organization_id: uuid.UUID
    role: str = Field(min_length=1)
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}


class TeamMembership(BaseModel):
    user_id: uuid.UUID
    team_id: uuid.UUID
    role: str = Field(min_length=1)
    metadata: OwnershipMetadata = Field(default_factory=OwnershipMetadata)

    model_config = {"frozen": True}
