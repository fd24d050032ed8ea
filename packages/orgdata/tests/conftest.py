"""
Shared fixtures: literal builders mirroring what PostgreSQL returns for the
composite and array columns.
"""

import uuid

import pytest
import structlog

from orgdata.literals import format_composite

NIL_ID = "00000000-0000-0000-0000-000000000000"
CREATED = "2024-01-01 00:00:00+00"
UPDATED = "2024-01-02 00:00:00+00"


@pytest.fixture
def nil_id():
    return NIL_ID


@pytest.fixture
def pg_array():
    """Build an array literal with every element quoted, as array_agg output does."""

    def _build(elements):
        parts = []
        for element in elements:
            if element is None:
                parts.append("NULL")
                continue
            escaped = element.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'"{escaped}"')
        return "{" + ",".join(parts) + "}"

    return _build


@pytest.fixture
def make_membership():
    """Build a user_organization_join composite literal."""

    def _build(
        organization_id=NIL_ID,
        user_id=NIL_ID,
        role="user",
        owner_id=NIL_ID,
        created=CREATED,
        updated=UPDATED,
        deleted="",
    ):
        return format_composite(
            [organization_id, user_id, role, owner_id, created, updated, deleted]
        )

    return _build


@pytest.fixture
def make_team():
    """Build a teams composite literal."""

    def _build(
        team_id=None,
        organization_id=NIL_ID,
        name="core",
        capacity="0",
        payment_plan_id="",
        owner_id=NIL_ID,
        created=CREATED,
        updated=UPDATED,
        deleted="",
    ):
        return format_composite([
            str(uuid.uuid4()) if team_id is None else team_id,
            organization_id,
            name,
            capacity,
            payment_plan_id,
            owner_id,
            created,
            updated,
            deleted,
        ])

    return _build


@pytest.fixture
def make_payment_plan():
    """Build a payment_plans composite literal."""

    def _build(
        payment_plan_id=None,
        name="Pro",
        cost="9.99",
        currency="USD",
        term="Monthly",
        owner_id=NIL_ID,
        created=CREATED,
        updated=UPDATED,
        deleted="",
    ):
        return format_composite([
            str(uuid.uuid4()) if payment_plan_id is None else payment_plan_id,
            name,
            cost,
            currency,
            term,
            owner_id,
            created,
            updated,
            deleted,
        ])

    return _build


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Tests that configure logging must not leak their level filter into others."""
    yield
    structlog.reset_defaults()
