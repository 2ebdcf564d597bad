"""JSON file source for offline dataset dumps."""

import json
import logging
from pathlib import Path

from segment_explorer.exceptions import UpstreamUnavailableError
from segment_explorer.store.records import RecordStore

logger = logging.getLogger(__name__)


class JsonFileSource:
    """Read a clustering service response saved to disk."""

    def __init__(self, path: str | Path) -> None:
        """Initialize JSON file source.

        Parameters
        ----------
        path : str | Path
            File holding the JSON payload.
        """
        self.path = Path(path)

    def fetch_payload(self) -> object:
        """Read and decode the payload."""
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            raise UpstreamUnavailableError(f"cannot read {self.path}: {exc}") from exc
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError
            raise UpstreamUnavailableError(f"{self.path} is not valid JSON") from exc

    def load(self, strict: bool = False) -> RecordStore:
        """Read the file and build a record store."""
        logger.info("Loading dataset from %s", self.path)
        return RecordStore.from_payload(self.fetch_payload(), strict=strict)
