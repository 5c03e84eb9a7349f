"""Shared constants and enums for the payment dashboard.

Defines canonical values for spending categories, payment modes,
transaction statuses, status filters, and calendar labels. Every call
site refers to these instead of repeating string literals.
"""

from enum import StrEnum

from payment_dashboard.lib.logging_config import get_logger

logger = get_logger("enums")


class Category(StrEnum):
    """Spending categories, in the order the dashboard palette assigns them."""

    FOOD_AND_DINING = "Food & Dining"
    SHOPPING = "Shopping"
    TRANSPORT = "Transport"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRAVEL = "Travel"


class PaymentMode(StrEnum):
    """How the payer initiated the transfer."""

    UPI_ID = "UPI ID"
    QR_CODE = "QR Code"
    PHONE_NUMBER = "Phone Number"


class Status(StrEnum):
    """Outcome of the fraud heuristic, fixed at generation time."""

    SUCCESS = "Success"
    FLAGGED = "Flagged"


class StatusFilter(StrEnum):
    """Status filter values offered to the presentation layer.

    ALL is the identity filter; the other members match Status values.
    """

    ALL = "All"
    SUCCESS = "Success"
    FLAGGED = "Flagged"

    @classmethod
    def parse(cls, value: "str | StatusFilter | None") -> "StatusFilter":
        """Resolve a raw filter value, falling back to ALL when unrecognized.

        Args:
            value: Filter value as received from the presentation layer.

        Returns:
            The matching StatusFilter, or StatusFilter.ALL.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unrecognized status filter %r, showing all transactions", value)
            return cls.ALL


MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Index matches datetime.weekday(): Monday is 0
WEEKDAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
