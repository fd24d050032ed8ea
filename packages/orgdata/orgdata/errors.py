"""
Decode errors.

Every decoder fails fast with one of these. While unwinding, callers add
positional context with ``wrap`` so the final message reads outer-to-inner,
e.g. ``"organization_memberships[1]: metadata: error parsing created_at: ..."``.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def wrap(self, context: str) -> DecodeError:
        """Prepend a context segment and return the same exception."""
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class InvalidType(DecodeError):
    """A cell value is neither text nor bytes."""


class MalformedLiteral(DecodeError):
    """A composite or array literal is not well formed."""


class InvalidFieldCount(DecodeError):
    """A composite literal has the wrong number of fields for its type."""

    def __init__(self, type_name: str, expected: int, actual: int):
        super().__init__(
            f"invalid field count for {type_name}: expected {expected}, got {actual}"
        )
        self.type_name = type_name
        self.expected = expected
        self.actual = actual


class TimestampParseError(DecodeError):
    """A mandatory timestamp field is missing or malformed."""


class InvalidIdentifier(DecodeError):
    """An identifier field is empty or not a valid UUID."""


class InvalidOwnerID(InvalidIdentifier):
    pass


class InvalidUserID(InvalidIdentifier):
    pass


class InvalidOrganizationID(InvalidIdentifier):
    pass


class InvalidTeamID(InvalidIdentifier):
    pass


class InvalidPaymentPlanID(InvalidIdentifier):
    pass


class InvalidRole(DecodeError):
    """A membership role field is empty."""


class InvalidCapacity(DecodeError):
    pass


class InvalidCost(DecodeError):
    pass
