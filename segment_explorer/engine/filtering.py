"""Filter engine: derive the subset of records matching the caller's criteria."""

from typing import Iterable

from segment_explorer.models.criteria import FilterCriteria
from segment_explorer.models.customer import CustomerRecord


def filter_records(
    records: Iterable[CustomerRecord],
    criteria: FilterCriteria | None = None,
) -> list[CustomerRecord]:
    """Return the records matching ``criteria``, in input order.

    A record matches when the cluster constraint is absent or equal to its
    ``cluster`` and the location constraint is absent or exactly equal to
    its ``location`` (case-sensitive). Without criteria the result is a
    copy of the input. Never raises; no match yields an empty list.

    Parameters
    ----------
    records : Iterable[CustomerRecord]
        Records to filter. Not modified.
    criteria : FilterCriteria | None
        Constraints to apply. ``None`` means no constraint.

    Returns
    -------
    list[CustomerRecord]
        New list of matching records.
    """
    if criteria is None or criteria.is_empty:
        return list(records)
    return [record for record in records if criteria.matches(record)]
