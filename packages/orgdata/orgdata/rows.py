"""
Row decoding.

Assembles a full ``User`` or ``Organization`` from one fetched row, given as a
mapping of column name to cell value. Plain columns may already be typed by the
driver (``uuid.UUID``, ``datetime``); composite and array columns arrive as text
or bytes and go through ``orgdata.decoders``.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone, tzinfo
from typing import Any, Mapping, Optional

import structlog

from .decoders import (
    decode_organization_memberships,
    decode_payment_plan,
    decode_team_memberships,
    decode_teams,
)
from .errors import (
    DecodeError,
    InvalidIdentifier,
    InvalidOrganizationID,
    InvalidOwnerID,
    InvalidUserID,
    TimestampParseError,
)
from .scalars import ensure_utc_representable, parse_identifier, parse_timestamp, scan_to_string
from .schemas import Organization, OwnershipMetadata, PaymentPlan, TimestampSet, User, UserRef

log = structlog.get_logger()


def _identifier_cell(row: Mapping[str, Any], column: str, error_cls: type[InvalidIdentifier]) -> uuid.UUID:
    value = row.get(column)
    if isinstance(value, uuid.UUID):
        return value
    if value is None:
        raise error_cls(f"invalid {column}: missing value")
    try:
        text = scan_to_string(value)
    except DecodeError as exc:
        raise exc.wrap(f"error reading {column}")
    return parse_identifier(text, error_cls, column)


def _timestamp_cell(row: Mapping[str, Any], column: str, tz: tzinfo) -> Optional[datetime]:
    value = row.get(column)
    if value is None:
        return None
    try:
        if isinstance(value, datetime):
            return ensure_utc_representable(value if value.tzinfo is not None else value.replace(tzinfo=tz))
        text = scan_to_string(value)
        return parse_timestamp(text, tz) if text else None
    except DecodeError as exc:
        raise exc.wrap(f"error parsing {column}")


def _metadata_cells(row: Mapping[str, Any], tz: tzinfo) -> OwnershipMetadata:
    owner_id = _identifier_cell(row, "owner_id", InvalidOwnerID)

    created_at = _timestamp_cell(row, "created_at", tz)
    updated_at = _timestamp_cell(row, "updated_at", tz)
    if created_at is None:
        raise TimestampParseError("missing created_at")
    if updated_at is None:
        raise TimestampParseError("missing updated_at")

    return OwnershipMetadata(
        owner=UserRef(user_id=owner_id),
        timestamps=TimestampSet(
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=_timestamp_cell(row, "deleted_at", tz),
        ),
    )


def _payment_plan_cell(row: Mapping[str, Any], tz: tzinfo) -> Optional[PaymentPlan]:
    value = row.get("payment_plan")
    if value is None:
        return None
    try:
        return decode_payment_plan(value, tz)
    except DecodeError as exc:
        raise exc.wrap("error parsing payment_plan")


def _column(column: str, decoder, row: Mapping[str, Any], tz: tzinfo):
    try:
        return decoder(row.get(column), tz)
    except DecodeError as exc:
        raise exc.wrap(f"error parsing {column}")


def decode_user_row(row: Mapping[str, Any], tz: tzinfo = timezone.utc) -> User:
    """
    Decode a user row.

    Columns: user_id, owner_id, organization_memberships, team_memberships,
    payment_plan, created_at, updated_at, deleted_at. Only user_id, owner_id,
    created_at and updated_at are required.
    """
    try:
        user = User(
            id=_identifier_cell(row, "user_id", InvalidUserID),
            organizations=_column("organization_memberships", decode_organization_memberships, row, tz),
            teams=_column("team_memberships", decode_team_memberships, row, tz),
            payment_plan=_payment_plan_cell(row, tz),
            metadata=_metadata_cells(row, tz),
        )
    except DecodeError as exc:
        exc.wrap("error decoding user row")
        log.warning("user_row.decode_failed", error=str(exc), kind=type(exc).__name__)
        raise

    log.debug(
        "user_row.decoded",
        user_id=str(user.id),
        organizations=len(user.organizations),
        teams=len(user.teams),
    )
    return user


def decode_organization_row(row: Mapping[str, Any], tz: tzinfo = timezone.utc) -> Organization:
    """
    Decode an organization row.

    Columns: organization_id, owner_id, users, teams, payment_plan, created_at,
    updated_at, deleted_at. ``users`` is an array of user_organization_join
    composites and ``teams`` an array of teams composites.
    """
    try:
        org = Organization(
            id=_identifier_cell(row, "organization_id", InvalidOrganizationID),
            users=_column("users", decode_organization_memberships, row, tz),
            teams=_column("teams", decode_teams, row, tz),
            payment_plan=_payment_plan_cell(row, tz),
            metadata=_metadata_cells(row, tz),
        )
    except DecodeError as exc:
        exc.wrap("error decoding organization row")
        log.warning("organization_row.decode_failed", error=str(exc), kind=type(exc).__name__)
        raise

    log.debug(
        "organization_row.decoded",
        organization_id=str(org.id),
        users=len(org.users),
        teams=len(org.teams),
    )
    return org
