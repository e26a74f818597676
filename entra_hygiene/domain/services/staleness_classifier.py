"""Domain services for classifying directory objects."""

from datetime import date

from ..entities import ActivityFact, ClassificationResult, DirectoryObject
from ..value_objects import (
    ClassificationStatus,
    InactivityThresholds,
    SeverityBand,
    SeverityCutoffs,
)


class MembershipClassifier:
    """Flags groups without members."""

    def classify(self, group: DirectoryObject) -> ClassificationResult | None:
        """Return an EMPTY result if the group has no members, else None."""
        count = group.membership.member_count if group.membership else 0
        if count >= 1:
            return None
        return ClassificationResult(
            subject=group,
            status=ClassificationStatus.EMPTY,
            days=None,
            threshold=None,
        )


class ActivityClassifier:
    """Flags accounts whose last sign-in is older than their threshold."""

    def __init__(
        self,
        thresholds: InactivityThresholds,
        cutoffs: SeverityCutoffs | None = None,
        *,
        missing_status: ClassificationStatus = ClassificationStatus.NEVER_SIGNED_IN,
    ) -> None:
        """
        Initialize classifier.

        Args:
            thresholds: Inactivity thresholds per account category.
            cutoffs: Cutoffs for severity banding.
            missing_status: Status reported when no sign-in timestamp exists.
        """
        self._thresholds = thresholds
        self._cutoffs = cutoffs or SeverityCutoffs()
        self._missing_status = missing_status

    def classify(
        self, account: DirectoryObject, reference_date: date
    ) -> ClassificationResult | None:
        """
        Classify one account against ``reference_date``.

        Accounts without a sign-in timestamp (never signed in, or the lookup
        failed) are always flagged with a ``None`` days metric.

        Returns:
            ClassificationResult if flagged, otherwise None.
        """
        activity = account.activity or ActivityFact()
        threshold = self._thresholds.for_category(activity.category)
        days = activity.days_since_activity(reference_date)

        if days is None:
            status = self._missing_status
        elif days > threshold:
            status = ClassificationStatus.INACTIVE
        else:
            return None

        return ClassificationResult(
            subject=account,
            status=status,
            days=days,
            threshold=threshold,
            severity=SeverityBand.for_days_inactive(days, self._cutoffs),
        )


class ExpiryClassifier:
    """Computes days until expiry for every credential of an object."""

    def __init__(self, cutoffs: SeverityCutoffs | None = None) -> None:
        """Initialize classifier with severity cutoffs."""
        self._cutoffs = cutoffs or SeverityCutoffs()

    def classify(
        self, owner: DirectoryObject, reference_date: date
    ) -> list[ClassificationResult]:
        """One result per credential with a known expiry; others are skipped."""
        results: list[ClassificationResult] = []
        for credential in owner.credentials:
            if not credential.has_expiry:
                continue
            days = credential.days_until_expiry(reference_date)
            results.append(
                ClassificationResult(
                    subject=owner,
                    status=ClassificationStatus.EXPIRED if days < 0 else ClassificationStatus.EXPIRING,
                    days=days,
                    threshold=None,
                    severity=SeverityBand.for_days_remaining(days, self._cutoffs),
                    credential=credential,
                )
            )
        return results
