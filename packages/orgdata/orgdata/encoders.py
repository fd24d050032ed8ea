"""
Transport encoding.

``encode_for_transport`` turns any schema instance into a JSON-ready dict.
Decoding is strict about required fields; encoding is permissive and drops
whatever is unset:

- zero or absent timestamps are omitted, never written as null or an epoch
- the owner is flattened to ``owner_id``
- an empty metadata block is omitted from its entity
- empty optional collections and references are omitted
"""

from __future__ import annotations

import json
from functools import singledispatch
from typing import Any

from .scalars import format_timestamp, is_zero_timestamp
from .schemas import (
    Organization,
    OrganizationMembership,
    OrganizationRef,
    OwnershipMetadata,
    PaymentPlan,
    PaymentPlanRef,
    Team,
    TeamMembership,
    TimestampSet,
    User,
    UserRef,
)


def encode_timestamps(ts: TimestampSet) -> dict[str, str]:
    out: dict[str, str] = {}
    for key in ("created_at", "updated_at", "deleted_at"):
        value = getattr(ts, key)
        if not is_zero_timestamp(value):
            out[key] = format_timestamp(value)
    return out


def encode_metadata(metadata: OwnershipMetadata) -> dict[str, str]:
    out: dict[str, str] = {}
    if metadata.owner is not None:
        out["owner_id"] = str(metadata.owner.user_id)
    out.update(encode_timestamps(metadata.timestamps))
    return out


def _with_metadata(out: dict[str, Any], metadata: OwnershipMetadata) -> dict[str, Any]:
    encoded = encode_metadata(metadata)
    if encoded:
        out["metadata"] = encoded
    return out


@singledispatch
def encode_for_transport(entity: Any) -> dict[str, Any]:
    """Encode a schema instance into its external JSON-shaped form."""
    raise TypeError(f"cannot encode {type(entity).__name__} for transport")


@encode_for_transport.register
def _(entity: TimestampSet) -> dict[str, Any]:
    return encode_timestamps(entity)


@encode_for_transport.register
def _(entity: OwnershipMetadata) -> dict[str, Any]:
    return encode_metadata(entity)


@encode_for_transport.register
def _(entity: UserRef) -> dict[str, Any]:
    return {"user_id": str(entity.user_id)}


@encode_for_transport.register
def _(entity: OrganizationRef) -> dict[str, Any]:
    return {"organization_id": str(entity.organization_id)}


@encode_for_transport.register
def _(entity: PaymentPlanRef) -> dict[str, Any]:
    return {"payment_plan_id": str(entity.payment_plan_id)}


@encode_for_transport.register
def _(entity: PaymentPlan) -> dict[str, Any]:
    # Metadata keys are inlined at the top level of a payment plan.
    out: dict[str, Any] = {
        "payment_plan_id": str(entity.id),
        "name": entity.name,
        "cost": entity.cost,
        "currency": entity.currency,
        "term": entity.term,
    }
    out.update(encode_metadata(entity.metadata))
    return out


@encode_for_transport.register
def _(entity: OrganizationMembership) -> dict[str, Any]:
    out: dict[str, Any] = {
        "user_id": str(entity.user_id),
        "organization_id": str(entity.organization_id),
        "role": entity.role,
    }
    return _with_metadata(out, entity.metadata)


@encode_for_transport.register
def _(entity: TeamMembership) -> dict[str, Any]:
    out: dict[str, Any] = {
        "user_id": str(entity.user_id),
        "team_id": str(entity.team_id),
        "role": entity.role,
    }
    return _with_metadata(out, entity.metadata)


@encode_for_transport.register
def _(entity: Team) -> dict[str, Any]:
    out: dict[str, Any] = {"team_id": str(entity.id)}
    if entity.organization is not None:
        out["organization"] = encode_for_transport(entity.organization)
    out["users"] = [encode_for_transport(m) for m in entity.users]
    out["name"] = entity.name
    out["capacity"] = entity.capacity
    if entity.payment_plan is not None:
        out["payment_plan"] = encode_for_transport(entity.payment_plan)
    return _with_metadata(out, entity.metadata)


@encode_for_transport.register
def _(entity: User) -> dict[str, Any]:
    out: dict[str, Any] = {"user_id": str(entity.id)}
    if entity.organizations:
        out["organization_memberships"] = [encode_for_transport(m) for m in entity.organizations]
    if entity.teams:
        out["team_memberships"] = [encode_for_transport(m) for m in entity.teams]
    if entity.payment_plan is not None:
        out["payment_plan"] = encode_for_transport(entity.payment_plan)
    return _with_metadata(out, entity.metadata)


@encode_for_transport.register
def _(entity: Organization) -> dict[str, Any]:
    out: dict[str, Any] = {
        "organization_id": str(entity.id),
        "users": [encode_for_transport(m) for m in entity.users],
    }
    if entity.teams:
        out["teams"] = [encode_for_transport(t) for t in entity.teams]
    if entity.payment_plan is not None:
        out["payment_plan"] = encode_for_transport(entity.payment_plan)
    return _with_metadata(out, entity.metadata)


def dumps(entity: Any, indent: int | None = 4) -> str:
    """Encode ``entity`` for transport and serialize it to JSON text."""
    return json.dumps(encode_for_transport(entity), indent=indent or None)
