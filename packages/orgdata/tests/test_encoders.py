"""Tests for transport encoding and its omission rules."""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone

import pytest

from orgdata.encoders import dumps, encode_for_transport, encode_metadata
from orgdata.schemas import (
    Organization,
    OrganizationMembership,
    OrganizationRef,
    OwnershipMetadata,
    PaymentPlan,
    PaymentPlanRef,
    Team,
    TimestampSet,
    User,
    UserRef,
)

OWNER = uuid.UUID(int=1)
JAN_1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
JAN_2 = datetime(2024, 1, 2, tzinfo=timezone.utc)


@pytest.fixture
def metadata():
    return OwnershipMetadata(
        owner=UserRef(user_id=OWNER),
        timestamps=TimestampSet(created_at=JAN_1, updated_at=JAN_2),
    )


class TestMetadataEncoding:

    def test_empty_timestamps(self):
        assert encode_for_transport(TimestampSet()) == {}

    def test_zero_timestamp_omitted(self):
        zero = datetime(1, 1, 1, tzinfo=timezone.utc)
        assert encode_for_transport(TimestampSet(created_at=zero, updated_at=JAN_2)) == {
            "updated_at": "2024-01-02T00:00:00Z",
        }

    def test_owner_flattened(self, metadata):
        assert encode_metadata(metadata) == {
            "owner_id": str(OWNER),
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        }

    def test_absent_owner_omitted(self):
        md = OwnershipMetadata(timestamps=TimestampSet(created_at=JAN_1))
        assert encode_metadata(md) == {"created_at": "2024-01-01T00:00:00Z"}


class TestEntityEncoding:

    def test_user_minimal(self):
        user = User(id=uuid.UUID(int=5))
        assert encode_for_transport(user) == {"user_id": str(uuid.UUID(int=5))}

    def test_user_full(self, metadata):
        org_id = uuid.uuid4()
        plan = PaymentPlan(id=uuid.UUID(int=9), name="Pro", cost=9.5, currency="USD", term="Monthly")
        user = User(
            id=OWNER,
            organizations=[
                OrganizationMembership(user_id=OWNER, organization_id=org_id, role="user", metadata=metadata)
            ],
            payment_plan=plan,
            metadata=metadata,
        )
        encoded = encode_for_transport(user)
        assert "team_memberships" not in encoded
        assert encoded["organization_memberships"] == [{
            "user_id": str(OWNER),
            "organization_id": str(org_id),
            "role": "user",
            "metadata": encode_metadata(metadata),
        }]
        assert encoded["payment_plan"] == {
            "payment_plan_id": str(uuid.UUID(int=9)),
            "name": "Pro",
            "cost": 9.5,
            "currency": "USD",
            "term": "Monthly",
        }
        assert encoded["metadata"]["owner_id"] == str(OWNER)

    def test_payment_plan_inlines_metadata(self, metadata):
        plan = PaymentPlan(id=uuid.UUID(int=9), metadata=metadata)
        encoded = encode_for_transport(plan)
        assert "metadata" not in encoded
        assert encoded["owner_id"] == str(OWNER)
        assert encoded["created_at"] == "2024-01-01T00:00:00Z"

    def test_organization_always_lists_users(self):
        encoded = encode_for_transport(Organization(id=uuid.UUID(int=2)))
        assert encoded == {"organization_id": str(uuid.UUID(int=2)), "users": []}

    def test_team(self, metadata):
        team = Team(
            id=uuid.UUID(int=3),
            organization=OrganizationRef(organization_id=uuid.UUID(int=2)),
            name="Platform",
            payment_plan=PaymentPlanRef(payment_plan_id=uuid.UUID(int=9)),
            metadata=metadata,
        )
        encoded = encode_for_transport(team)
        assert encoded["organization"] == {"organization_id": str(uuid.UUID(int=2))}
        assert encoded["payment_plan"] == {"payment_plan_id": str(uuid.UUID(int=9))}
        assert encoded["users"] == []
        assert encoded["capacity"] == 0
        assert list(encoded) == [
            "team_id", "organization", "users", "name", "capacity", "payment_plan", "metadata",
        ]

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            encode_for_transport(object())


def test_dumps_indent(metadata):
    user = User(id=OWNER, metadata=metadata)
    text = dumps(user)
    assert "\n    " in text
    assert json.loads(text) == encode_for_transport(user)
    assert "\n" not in dumps(user, indent=0)
