"""
Shared metadata and weak-reference schemas.

References (``UserRef``, ``OrganizationRef``, ``PaymentPlanRef``) carry only an
identifier. They are distinct types from the hydrated entities so an owner or
parent is never expanded into a full record.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Weak references
# ---------------------------------------------------------------------------

class UserRef(BaseModel):
    user_id: uuid.UUID

    model_config = {"frozen": True}


class OrganizationRef(BaseModel):
    organization_id: uuid.UUID

    model_config = {"frozen": True}


class PaymentPlanRef(BaseModel):
    payment_plan_id: uuid.UUID

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class TimestampSet(BaseModel):
    """Creation, update and soft-delete instants. ``deleted_at`` None = not deleted."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class OwnershipMetadata(BaseModel):
    """Owner reference plus timestamps, embedded in every entity."""

    owner: Optional[UserRef] = None
    timestamps: TimestampSet = Field(default_factory=TimestampSet)

    model_config = {"frozen": True}
