"""Filter criteria held by the caller and passed into each computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from segment_explorer.models.customer import CustomerRecord

# Selector value meaning "no constraint on this dimension"
ALL = "all"


@dataclass(frozen=True)
class FilterCriteria:
    """Optional cluster and location constraints.

    ``None`` on either dimension means no constraint.
    """

    cluster_id: int | None = None
    location: str | None = None

    @classmethod
    def from_selection(
        cls,
        cluster: int | str | None = None,
        location: str | None = None,
    ) -> FilterCriteria:
        """Build criteria from raw selector values.

        Parameters
        ----------
        cluster : int | str | None
            Selected segment, as an int or its string form. ``"all"`` or
            ``None`` clears the constraint.
        location : str | None
            Selected location. ``"all"`` or ``None`` clears the constraint.

        Returns
        -------
        FilterCriteria
            Parsed criteria.

        Raises
        ------
        ValueError
            If ``cluster`` is a string that is not an integer.
        """
        cluster_id: int | None
        if cluster is None or cluster == ALL:
            cluster_id = None
        else:
            cluster_id = int(cluster)

        if location == ALL:
            location = None

        return cls(cluster_id=cluster_id, location=location)

    @property
    def is_empty(self) -> bool:
        """True when neither dimension is constrained."""
        return self.cluster_id is None and self.location is None

    def matches(self, record: CustomerRecord) -> bool:
        """Check whether a record satisfies both constraints."""
        if self.cluster_id is not None and record.cluster != self.cluster_id:
            return False
        if self.location is not None and record.location != self.location:
            return False
        return True
