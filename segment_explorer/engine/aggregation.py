"""Aggregator: counts, averages and top keys over a sequence of records.

Every function is pure: inputs are never mutated and each call returns
freshly built output. Callers decide whether to pass the full store or a
filtered subset.
"""

from decimal import Decimal
from typing import Callable, Hashable, Iterable, Mapping, Sequence, TypeVar

from segment_explorer.exceptions import EmptyDatasetError
from segment_explorer.models.customer import CustomerRecord

K = TypeVar("K", bound=Hashable)

KeySelector = Callable[[CustomerRecord], K]
ValueSelector = Callable[[CustomerRecord], int | float | Decimal]


def by_cluster(record: CustomerRecord) -> int:
    return record.cluster


def by_location(record: CustomerRecord) -> str:
    return record.location


def by_category(record: CustomerRecord) -> str:
    return record.category


def age_of(record: CustomerRecord) -> int:
    return record.age


def purchase_amount_of(record: CustomerRecord) -> Decimal:
    return record.purchase_amount


def count_by(records: Iterable[CustomerRecord], key_selector: KeySelector) -> dict[K, int]:
    """Count occurrences of each distinct key.

    Parameters
    ----------
    records : Iterable[CustomerRecord]
        Records to count.
    key_selector : Callable[[CustomerRecord], K]
        Extracts the key to count, e.g. ``by_cluster``.

    Returns
    -------
    dict[K, int]
        Distribution whose keys follow first-seen order in ``records``.
    """
    distribution: dict[K, int] = {}
    for record in records:
        key = key_selector(record)
        distribution[key] = distribution.get(key, 0) + 1
    return distribution


def average(records: Sequence[CustomerRecord], value_selector: ValueSelector) -> float | Decimal:
    """Arithmetic mean of ``value_selector`` over ``records``.

    Decimal values give a Decimal mean; int and float values give a float.

    Parameters
    ----------
    records : Sequence[CustomerRecord]
        Records to average over.
    value_selector : Callable[[CustomerRecord], int | float | Decimal]
        Extracts the numeric value, e.g. ``age_of``.

    Returns
    -------
    float | Decimal
        The mean.

    Raises
    ------
    EmptyDatasetError
        If ``records`` is empty.
    """
    if not records:
        raise EmptyDatasetError("cannot average over zero records")
    return sum(value_selector(record) for record in records) / len(records)


def top_key(distribution: Mapping[K, int]) -> K:
    """Return the key with the highest count.

    Ties go to the key that comes first in the mapping's iteration order,
    which for ``count_by`` output is first-seen order.

    Raises
    ------
    EmptyDatasetError
        If ``distribution`` is empty.
    """
    if not distribution:
        raise EmptyDatasetError("cannot pick a top key from an empty distribution")
    # max() keeps the first of equal maxima
    return max(distribution, key=distribution.__getitem__)
