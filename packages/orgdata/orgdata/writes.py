"""
Insert write path.

Produces the table rows carrying the column values an insert needs. A fresh
identifier is assigned to new entities; timestamps are left to the database
defaults. Building and executing the SQL is the caller's job.
"""

from __future__ import annotations

import uuid

import structlog

from .errors import InvalidOwnerID
from .models import OrganizationRow, UserOrganizationJoin, UserRow
from .schemas import Organization, OrganizationMembership, OwnershipMetadata, User

log = structlog.get_logger()


def _owner_id(metadata: OwnershipMetadata, entity: str) -> uuid.UUID:
    if metadata.owner is None:
        raise InvalidOwnerID(f"{entity} has no owner")
    return metadata.owner.user_id


def prepare_user_insert(user: User) -> tuple[User, UserRow]:
    """Assign a new user_id and return the updated user with its ``users`` row."""
    owner_id = _owner_id(user.metadata, "user")
    user = user.model_copy(update={"id": uuid.uuid4()})
    row = UserRow(
        user_id=user.id,
        payment_plan_id=user.payment_plan.id if user.payment_plan else None,
        owner_id=owner_id,
    )
    log.info("user.insert_prepared", user_id=str(user.id), owner_id=str(owner_id))
    return user, row


def prepare_organization_insert(org: Organization) -> tuple[Organization, OrganizationRow]:
    """Assign a new organization_id and return the updated org with its ``organizations`` row."""
    owner_id = _owner_id(org.metadata, "organization")
    org = org.model_copy(update={"id": uuid.uuid4()})
    row = OrganizationRow(
        organization_id=org.id,
        payment_plan_id=org.payment_plan.id if org.payment_plan else None,
        owner_id=owner_id,
    )
    log.info("organization.insert_prepared", organization_id=str(org.id), owner_id=str(owner_id))
    return org, row


def prepare_membership_insert(membership: OrganizationMembership) -> UserOrganizationJoin:
    """Return the ``user_organization_join`` row for a membership."""
    owner_id = _owner_id(membership.metadata, "membership")
    row = UserOrganizationJoin(
        organization_id=membership.organization_id,
        user_id=membership.user_id,
        user_role=membership.role,
        owner_id=owner_id,
    )
    log.info(
        "membership.insert_prepared",
        organization_id=str(membership.organization_id),
        user_id=str(membership.user_id),
        role=membership.role,
    )
    return row
