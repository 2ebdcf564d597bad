"""Immutable store of clustered customer records with ingestion quarantine."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from segment_explorer.exceptions import InvalidRecordError, UpstreamUnavailableError
from segment_explorer.models.customer import CustomerRecord, QuarantinedRecord
from segment_explorer.serialization import record_from_dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordStore:
    """Read-only, ordered collection of records for one dataset load.

    Records keep the order the upstream service delivered them in. Objects
    that failed validation are kept in ``quarantined`` and never reach the
    aggregation engine.
    """

    records: tuple[CustomerRecord, ...] = ()
    quarantined: tuple[QuarantinedRecord, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any sequence but hold a tuple so the store cannot be mutated
        object.__setattr__(self, "records", tuple(self.records))
        object.__setattr__(self, "quarantined", tuple(self.quarantined))

    @classmethod
    def from_payload(cls, payload: Any, strict: bool = False) -> "RecordStore":
        """Build a store from a decoded clustering service response.

        Parameters
        ----------
        payload : Any
            Decoded JSON: a list of record objects, or an error object.
        strict : bool
            Raise on the first invalid record instead of quarantining it.

        Returns
        -------
        RecordStore
            Loaded store. An empty list yields an empty store.

        Raises
        ------
        UpstreamUnavailableError
            If the payload is an error object or not a list.
        InvalidRecordError
            In strict mode, for the first record violating the contract.
        """
        if isinstance(payload, dict) and "error" in payload:
            raise UpstreamUnavailableError(f"clustering service returned an error: {payload['error']}")
        if not isinstance(payload, list):
            raise UpstreamUnavailableError(
                f"expected a list of records, got {type(payload).__name__}"
            )

        records: list[CustomerRecord] = []
        quarantined: list[QuarantinedRecord] = []
        for index, item in enumerate(payload):
            try:
                records.append(record_from_dict(item))
            except InvalidRecordError as exc:
                if strict:
                    raise
                quarantined.append(QuarantinedRecord(index=index, payload=item, reason=str(exc)))

        if quarantined:
            logger.warning(
                "Quarantined %d of %d upstream records; first reason: %s",
                len(quarantined),
                len(payload),
                quarantined[0].reason,
                extra={"extra": {"quarantined": len(quarantined), "received": len(payload)}},
            )
        logger.info("Loaded %d records", len(records))

        return cls(records=tuple(records), quarantined=tuple(quarantined))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CustomerRecord]:
        return iter(self.records)

    @property
    def is_empty(self) -> bool:
        """True when the dataset loaded but holds no valid records."""
        return not self.records

    def summary(self) -> dict[str, int]:
        """Return ingestion counts."""
        return {
            "records": len(self.records),
            "quarantined": len(self.quarantined),
        }
