"""In-memory record store for a loaded dataset."""

from segment_explorer.store.records import RecordStore

__all__ = ["RecordStore"]
