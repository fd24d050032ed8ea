"""
Composite decoders.

Each decoder takes one raw cell (text or bytes) holding a composite literal and
returns a schema instance. Field positions follow the table column order in
``orgdata.models``; the trailing four columns of every entity are its ownership
metadata and are handed, re-wrapped, to ``decode_ownership_metadata``.

Decoders are all-or-nothing: any failure raises a DecodeError subclass with the
context of every enclosing decoder prepended.
"""

from __future__ import annotations

import math
from datetime import timezone, tzinfo
from functools import partial
from typing import Any, Callable, TypeVar

from .errors import (
    DecodeError,
    InvalidCapacity,
    InvalidCost,
    InvalidIdentifier,
    InvalidOrganizationID,
    InvalidOwnerID,
    InvalidPaymentPlanID,
    InvalidRole,
    InvalidTeamID,
    InvalidUserID,
    TimestampParseError,
)
from .literals import format_composite, parse_array, parse_composite
from .scalars import parse_identifier, parse_timestamp, scan_to_string
from .schemas import (
    OrganizationMembership,
    OrganizationRef,
    OwnershipMetadata,
    PaymentPlan,
    PaymentPlanRef,
    Team,
    TeamMembership,
    TimestampSet,
    UserRef,
)

T = TypeVar("T")

TIMESTAMP_COLUMNS = ("created_at", "updated_at", "deleted_at")
OWNERSHIP_COLUMNS = ("owner_id", *TIMESTAMP_COLUMNS)
# user_organization_join table order; array_agg of the row emits organization_id before user_id
ORGANIZATION_MEMBERSHIP_COLUMNS = ("organization_id", "user_id", "user_role", *OWNERSHIP_COLUMNS)
TEAM_MEMBERSHIP_COLUMNS = ("team_id", "user_id", "user_role", *OWNERSHIP_COLUMNS)
TEAM_COLUMNS = ("team_id", "organization_id", "name", "capacity", "payment_plan_id", *OWNERSHIP_COLUMNS)
PAYMENT_PLAN_COLUMNS = ("payment_plan_id", "name", "cost", "currency", "term", *OWNERSHIP_COLUMNS)


def _scan(src: Any, type_name: str) -> str:
    try:
        return scan_to_string(src)
    except DecodeError as exc:
        raise exc.wrap(f"invalid type for {type_name} scan")


def _optional_identifier(value: str, error_cls: type[InvalidIdentifier], field: str):
    if not value:
        return None
    return parse_identifier(value, error_cls, field)


def _required_timestamp(value: str, field: str, tz: tzinfo):
    if not value:
        raise TimestampParseError(f"missing {field}")
    try:
        return parse_timestamp(value, tz)
    except DecodeError as exc:
        raise exc.wrap(f"error parsing {field}")


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

def decode_timestamp_set(src: Any, tz: tzinfo = timezone.utc) -> TimestampSet:
    """Decode ``(created_at,updated_at,deleted_at)``; an empty deleted_at means not deleted."""
    s = _scan(src, "TimestampSet")
    created, updated, deleted = parse_composite(s, len(TIMESTAMP_COLUMNS), "TimestampSet")

    created_at = _required_timestamp(created, "created_at", tz)
    updated_at = _required_timestamp(updated, "updated_at", tz)
    deleted_at = None
    if deleted:
        try:
            deleted_at = parse_timestamp(deleted, tz)
        except DecodeError as exc:
            raise exc.wrap("error parsing deleted_at")

    return TimestampSet(created_at=created_at, updated_at=updated_at, deleted_at=deleted_at)


def decode_ownership_metadata(src: Any, tz: tzinfo = timezone.utc) -> OwnershipMetadata:
    """Decode ``(owner_id,created_at,updated_at,deleted_at)`` into an OwnershipMetadata."""
    s = _scan(src, "OwnershipMetadata")
    fields = parse_composite(s, len(OWNERSHIP_COLUMNS), "OwnershipMetadata")

    owner_id = parse_identifier(fields[0], InvalidOwnerID, "owner_id")
    try:
        timestamps = decode_timestamp_set(format_composite(fields[1:]), tz)
    except DecodeError as exc:
        raise exc.wrap("error decoding timestamps for OwnershipMetadata")

    return OwnershipMetadata(owner=UserRef(user_id=owner_id), timestamps=timestamps)


def _trailing_metadata(fields: list[str], type_name: str, tz: tzinfo) -> OwnershipMetadata:
    try:
        return decode_ownership_metadata(format_composite(fields[-len(OWNERSHIP_COLUMNS):]), tz)
    except DecodeError as exc:
        raise exc.wrap(f"error decoding metadata for {type_name}")


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def decode_composite_array(
    src: Any, element_decoder: Callable[[str], T], type_name: str
) -> list[T]:
    """
    Decode an array literal of composites, applying ``element_decoder`` to each element.

    Order is preserved. A NULL cell is an empty array and NULL elements are
    skipped. If any element fails, nothing is returned.
    """
    if src is None:
        return []
    s = _scan(src, f"{type_name} array")
    try:
        elements = parse_array(s)
    except DecodeError as exc:
        raise exc.wrap(f"error parsing db result into {type_name} array")

    results: list[T] = []
    for index, element in enumerate(elements):
        if element is None:
            continue
        try:
            results.append(element_decoder(element))
        except DecodeError as exc:
            raise exc.wrap(f"error parsing element {index} into {type_name}")
    return results


# ---------------------------------------------------------------------------
# Memberships
# ---------------------------------------------------------------------------

def decode_organization_membership(src: Any, tz: tzinfo = timezone.utc) -> OrganizationMembership:
    s = _scan(src, "OrganizationMembership")
    fields = parse_composite(s, len(ORGANIZATION_MEMBERSHIP_COLUMNS), "OrganizationMembership")

    user_id = parse_identifier(fields[1], InvalidUserID, "user_id")
    organization_id = parse_identifier(fields[0], InvalidOrganizationID, "organization_id")
    role = fields[2]
    if not role:
        raise InvalidRole("invalid user_role: empty value")

    return OrganizationMembership(
        user_id=user_id,
        organization_id=organization_id,
        role=role,
        metadata=_trailing_metadata(fields, "OrganizationMembership", tz),
    )


def decode_team_membership(src: Any, tz: tzinfo = timezone.utc) -> TeamMembership:
    s = _scan(src, "TeamMembership")
    fields = parse_composite(s, len(TEAM_MEMBERSHIP_COLUMNS), "TeamMembership")

    user_id = parse_identifier(fields[1], InvalidUserID, "user_id")
    team_id = parse_identifier(fields[0], InvalidTeamID, "team_id")
    role = fields[2]
    if not role:
        raise InvalidRole("invalid user_role: empty value")

    return TeamMembership(
        user_id=user_id,
        team_id=team_id,
        role=role,
        metadata=_trailing_metadata(fields, "TeamMembership", tz),
    )


def decode_organization_memberships(src: Any, tz: tzinfo = timezone.utc) -> list[OrganizationMembership]:
    return decode_composite_array(
        src, partial(decode_organization_membership, tz=tz), "OrganizationMembership"
    )


def decode_team_memberships(src: Any, tz: tzinfo = timezone.utc) -> list[TeamMembership]:
    return decode_composite_array(src, partial(decode_team_membership, tz=tz), "TeamMembership")


# ---------------------------------------------------------------------------
# Teams and payment plans
# ---------------------------------------------------------------------------

def decode_team(src: Any, tz: tzinfo = timezone.utc) -> Team:
    """Decode a ``teams`` row composite. Members are not part of the composite."""
    s = _scan(src, "Team")
    fields = parse_composite(s, len(TEAM_COLUMNS), "Team")

    team_id = parse_identifier(fields[0], InvalidTeamID, "team_id")
    organization_id = _optional_identifier(fields[1], InvalidOrganizationID, "organization_id")
    payment_plan_id = _optional_identifier(fields[4], InvalidPaymentPlanID, "payment_plan_id")

    capacity = 0
    if fields[3]:
        try:
            capacity = int(fields[3])
        except ValueError as exc:
            raise InvalidCapacity(f"invalid capacity: {fields[3]!r}") from exc
        if capacity < 0:
            raise InvalidCapacity(f"invalid capacity: {capacity} is negative")

    return Team(
        id=team_id,
        organization=OrganizationRef(organization_id=organization_id) if organization_id is not None else None,
        name=fields[2],
        capacity=capacity,
        payment_plan=PaymentPlanRef(payment_plan_id=payment_plan_id) if payment_plan_id is not None else None,
        metadata=_trailing_metadata(fields, "Team", tz),
    )


def decode_teams(src: Any, tz: tzinfo = timezone.utc) -> list[Team]:
    return decode_composite_array(src, partial(decode_team, tz=tz), "Team")


def decode_payment_plan(src: Any, tz: tzinfo = timezone.utc) -> PaymentPlan:
    s = _scan(src, "PaymentPlan")
    fields = parse_composite(s, len(PAYMENT_PLAN_COLUMNS), "PaymentPlan")

    payment_plan_id = parse_identifier(fields[0], InvalidPaymentPlanID, "payment_plan_id")

    cost = 0.0
    if fields[2]:
        try:
            cost = float(fields[2])
        except ValueError as exc:
            raise InvalidCost(f"invalid cost: {fields[2]!r}") from exc
        if not math.isfinite(cost):
            raise InvalidCost(f"invalid cost: {fields[2]!r}")

    return PaymentPlan(
        id=payment_plan_id,
        name=fields[1],
        cost=cost,
        currency=fields[3],
        term=fields[4],
        metadata=_trailing_metadata(fields, "PaymentPlan", tz),
    )
