"""Sign-in activity fact for users and service principals."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from ..value_objects import AccountCategory


@dataclass(frozen=True, slots=True)
class ActivityFact:
    """Last sign-in of an account.

    ``last_activity`` is ``None`` when the account never signed in, or when
    ``lookup_failed`` is set and the sign-in could not be retrieved.
    """

    last_activity: datetime | None = None
    category: AccountCategory = AccountCategory.STANDARD
    lookup_failed: bool = False

    def days_since_activity(self, reference_date: date) -> int | None:
        """Whole days between the last sign-in date and ``reference_date``."""
        if self.last_activity is None:
            return None
        last = (
            self.last_activity
            if self.last_activity.tzinfo
            else self.last_activity.replace(tzinfo=UTC)
        )
        return (reference_date - last.astimezone(UTC).date()).days
