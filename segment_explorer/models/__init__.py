"""Domain models for clustered customer records and derived views."""

from segment_explorer.models.criteria import ALL, FilterCriteria
from segment_explorer.models.customer import CustomerRecord, QuarantinedRecord
from segment_explorer.models.summary import DashboardSummary

__all__ = [
    "ALL",
    "CustomerRecord",
    "DashboardSummary",
    "FilterCriteria",
    "QuarantinedRecord",
]
