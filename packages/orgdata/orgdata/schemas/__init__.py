from .common import OrganizationRef, OwnershipMetadata, PaymentPlanRef, TimestampSet, UserRef  # noqa: F401
from .payment_plans import PaymentPlan  # noqa: F401
from .memberships import OrganizationMembership, TeamMembership  # noqa: F401
from .teams import Team  # noqa: F401
from .users import User  # noqa: F401
from .organizations import Organization  # noqa: F401
