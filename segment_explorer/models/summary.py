"""Dashboard view-model assembled by the summary facade."""

from dataclasses import dataclass, field
from decimal import Decimal

from segment_explorer.models.criteria import FilterCriteria
from segment_explorer.models.customer import CustomerRecord


@dataclass(frozen=True)
class DashboardSummary:
    """Every value the presentation layer displays for one set of criteria.

    ``total_count``, ``cluster_distribution`` and ``location_distribution``
    always describe the full dataset. The averages, category distribution
    and top category follow the selected cluster only. ``table_rows``
    honors both filter dimensions.
    """

    criteria: FilterCriteria
    total_count: int
    average_age: float
    average_purchase_amount: Decimal
    top_category: str
    category_distribution: dict[str, int] = field(default_factory=dict)
    cluster_distribution: dict[int, int] = field(default_factory=dict)
    location_distribution: dict[str, int] = field(default_factory=dict)
    table_rows: list[CustomerRecord] = field(default_factory=list)
