# SQLModel table definitions. Column order is the composite field order the decoders rely on.
from .payment_plan import PaymentPlanRow  # noqa: F401
from .user import UserRow  # noqa: F401
from .organization import OrganizationRow  # noqa: F401
from .user_org import UserOrganizationJoin  # noqa: F401
from .team import TeamRow, UserTeamJoin  # noqa: F401
