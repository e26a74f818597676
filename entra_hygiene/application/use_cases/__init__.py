"""Application use cases - One per report."""

from .base import ReportUseCase
from .find_empty_groups import FindEmptyGroups
from .find_inactive_service_principals import FindInactiveServicePrincipals
from .find_inactive_users import FindInactiveUsers
from .rank_expiring_credentials import RankExpiringCredentials

__all__ = [
    "FindEmptyGroups",
    "FindInactiveServicePrincipals",
    "FindInactiveUsers",
    "RankExpiringCredentials",
    "ReportUseCase",
]
