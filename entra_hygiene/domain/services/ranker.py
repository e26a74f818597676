"""Aggregation and ranking of classification results."""

from collections.abc import Iterable

from ..entities import ClassificationResult
from ..value_objects import AccountCategory

DEFAULT_TOP_N = 10

_CATEGORY_ORDER = {category: index for index, category in enumerate(AccountCategory)}


def collapse_earliest(results: Iterable[ClassificationResult]) -> list[ClassificationResult]:
    """
    Keep the single result with the smallest days metric per entity.

    Entities are keyed by object id. Ties keep the first result encountered,
    and entities keep the position of their first appearance.
    """
    earliest: dict[str, ClassificationResult] = {}
    for result in results:
        if result.days is None:
            continue
        key = result.subject.id
        current = earliest.get(key)
        if current is None or result.days < current.days:
            earliest[key] = result
    return list(earliest.values())


def rank_by_expiry(
    results: Iterable[ClassificationResult], limit: int | None = DEFAULT_TOP_N
) -> list[ClassificationResult]:
    """
    Collapse per entity, sort soonest first and truncate to ``limit``.

    The sort is stable so equal metrics keep their encounter order.
    """
    ranked = sorted(collapse_earliest(results), key=lambda r: r.days)
    if limit is None:
        return ranked
    if limit < 0:
        msg = f"limit must be non-negative, got {limit}"
        raise ValueError(msg)
    return ranked[:limit]


def _inactivity_key(result: ClassificationResult) -> tuple[int, int, int, int]:
    activity = result.subject.activity
    category = activity.category if activity else AccountCategory.STANDARD
    severity = result.severity.rank if result.severity else 0
    if not result.status.has_activity_timestamp or result.days is None:
        return (_CATEGORY_ORDER[category], severity, 0, 0)
    return (_CATEGORY_ORDER[category], severity, 1, -result.days)


def rank_by_inactivity(results: Iterable[ClassificationResult]) -> list[ClassificationResult]:
    """Sort by category, then severity, then most stale first. Accounts that never signed in lead."""
    return sorted(results, key=_inactivity_key)
