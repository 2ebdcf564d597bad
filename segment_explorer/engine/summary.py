"""Summary facade: the view-model values a segmentation dashboard displays."""

import logging
from decimal import Decimal

from segment_explorer.config import DEFAULT_TABLE_LIMIT
from segment_explorer.engine.aggregation import (
    age_of,
    average,
    by_category,
    by_cluster,
    by_location,
    count_by,
    purchase_amount_of,
    top_key,
)
from segment_explorer.engine.filtering import filter_records
from segment_explorer.models.criteria import FilterCriteria
from segment_explorer.models.customer import CustomerRecord
from segment_explorer.models.summary import DashboardSummary
from segment_explorer.store.records import RecordStore

logger = logging.getLogger(__name__)


class SummaryFacade:
    """Compose the filter engine and aggregator over one record store.

    Holds no state besides the immutable store: every method recomputes its
    result from scratch. ``cluster_id`` arguments select the scope of the
    headline statistics (``None`` for all records); location never narrows
    those. The cluster and location distributions always cover the full
    store, and ``table_rows`` is the only view honoring both filter
    dimensions.

    Parameters
    ----------
    store : RecordStore
        Loaded dataset.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def total_count(self) -> int:
        """Number of records in the full store, independent of any filter."""
        return len(self.store)

    def scope(self, cluster_id: int | None = None) -> list[CustomerRecord]:
        """All records, or only those in ``cluster_id``."""
        return filter_records(self.store, FilterCriteria(cluster_id=cluster_id))

    def average_age(self, cluster_id: int | None = None) -> float:
        """Mean age over the scope. Raises EmptyDatasetError for an empty scope."""
        return average(self.scope(cluster_id), age_of)

    def average_purchase_amount(self, cluster_id: int | None = None) -> Decimal:
        """Mean purchase amount over the scope. Raises EmptyDatasetError for an empty scope."""
        return average(self.scope(cluster_id), purchase_amount_of)

    def category_distribution(self, cluster_id: int | None = None) -> dict[str, int]:
        """Category counts over the scope, first-seen order."""
        return count_by(self.scope(cluster_id), by_category)

    def top_category(self, cluster_id: int | None = None) -> str:
        """Most frequent category in the scope, first-seen on ties."""
        return top_key(self.category_distribution(cluster_id))

    def cluster_distribution(self) -> dict[int, int]:
        """Records per cluster over the full store."""
        return count_by(self.store, by_cluster)

    def location_distribution(self) -> dict[str, int]:
        """Records per location over the full store."""
        return count_by(self.store, by_location)

    def cluster_options(self) -> list[int]:
        """Segment selector options in first-seen order."""
        return list(self.cluster_distribution())

    def location_options(self) -> list[str]:
        """Location selector options in first-seen order."""
        return list(self.location_distribution())

    def table_rows(
        self,
        criteria: FilterCriteria | None = None,
        limit: int = DEFAULT_TABLE_LIMIT,
    ) -> list[CustomerRecord]:
        """First ``limit`` records matching both filter dimensions, in dataset order.

        Raises
        ------
        ValueError
            If ``limit`` is negative.
        """
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        return filter_records(self.store, criteria)[:limit]

    def summarize(
        self,
        criteria: FilterCriteria | None = None,
        limit: int = DEFAULT_TABLE_LIMIT,
    ) -> DashboardSummary:
        """Compute every dashboard value for ``criteria``.

        Parameters
        ----------
        criteria : FilterCriteria | None
            Current selection. Only ``cluster_id`` scopes the headline
            statistics; both dimensions apply to the table rows.
        limit : int
            Maximum number of table rows.

        Returns
        -------
        DashboardSummary
            Freshly computed view-model.

        Raises
        ------
        EmptyDatasetError
            If the headline scope holds no records.
        """
        criteria = criteria or FilterCriteria()
        scoped = self.scope(criteria.cluster_id)
        categories = count_by(scoped, by_category)

        summary = DashboardSummary(
            criteria=criteria,
            total_count=self.total_count(),
            average_age=average(scoped, age_of),
            average_purchase_amount=average(scoped, purchase_amount_of),
            top_category=top_key(categories),
            category_distribution=categories,
            cluster_distribution=self.cluster_distribution(),
            location_distribution=self.location_distribution(),
            table_rows=self.table_rows(criteria, limit),
        )
        logger.debug(
            "Summarized cluster=%s location=%s scope=%d rows=%d",
            criteria.cluster_id,
            criteria.location,
            len(scoped),
            len(summary.table_rows),
        )
        return summary
