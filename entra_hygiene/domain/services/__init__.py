"""Domain services - Stateless operations on domain objects."""

from .ranker import DEFAULT_TOP_N, collapse_earliest, rank_by_expiry, rank_by_inactivity
from .staleness_classifier import ActivityClassifier, ExpiryClassifier, MembershipClassifier

__all__ = [
    "DEFAULT_TOP_N",
    "ActivityClassifier",
    "ExpiryClassifier",
    "MembershipClassifier",
    "collapse_earliest",
    "rank_by_expiry",
    "rank_by_inactivity",
]
