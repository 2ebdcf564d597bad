"""HTTP source fetching clustered records from the clustering service."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from segment_explorer.config import UpstreamConfig
from segment_explorer.exceptions import UpstreamUnavailableError
from segment_explorer.store.records import RecordStore

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class ClusterServiceClient:
    """Fetch the labeled dataset in a single batch.

    Retries retryable status codes, timeouts and connection errors with
    exponential backoff. Any failure surfaces as ``UpstreamUnavailableError``
    so callers can tell "no dataset loaded" from "loaded but empty".

    Parameters
    ----------
    config : UpstreamConfig | None
        Service location, timeout and retry policy.
    session : requests.Session | None
        Session to issue requests on (a new one when omitted).
    """

    def __init__(
        self,
        config: UpstreamConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or UpstreamConfig()
        self._session = session or requests.Session()

    def fetch_payload(self) -> Any:
        """Fetch and decode the raw JSON payload."""
        response = self._request()
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError(f"{self.config.url}: response was not valid JSON") from exc

    def load(self, strict: bool = False) -> RecordStore:
        """Fetch the dataset and build a record store.

        Parameters
        ----------
        strict : bool
            Raise on the first invalid record instead of quarantining it.

        Raises
        ------
        UpstreamUnavailableError
            If the service cannot be reached or returns an error payload.
        """
        payload = self.fetch_payload()
        return RecordStore.from_payload(payload, strict=strict)

    def _request(self) -> requests.Response:
        """Issue the GET with exponential backoff on retryable failures."""
        url = self.config.url
        max_retries = self.config.max_retries
        last_error: Exception | None = None

        for attempt in range(max_retries + 1):
            try:
                response = self._session.get(url, timeout=self.config.timeout_seconds)
                if response.status_code in RETRYABLE_STATUS_CODES:
                    raise requests.HTTPError(
                        f"Retryable HTTP status code: {response.status_code}",
                        response=response,
                    )
                response.raise_for_status()
                return response
            except requests.HTTPError as exc:
                last_error = exc
                status_code = exc.response.status_code if exc.response is not None else None
                if status_code not in RETRYABLE_STATUS_CODES:
                    logger.error("Cluster fetch failed status=%s url=%s error=%s", status_code, url, exc)
                    raise UpstreamUnavailableError(f"{url}: non-retryable request failure") from exc
            except (requests.Timeout, requests.ConnectionError) as exc:
                last_error = exc

            if attempt >= max_retries:
                break

            backoff_seconds = self.config.backoff_initial_seconds * (
                self.config.backoff_multiplier**attempt
            )
            logger.warning(
                "Cluster fetch retry attempt=%s/%s wait_seconds=%.2f url=%s",
                attempt + 1,
                max_retries,
                backoff_seconds,
                url,
            )
            time.sleep(backoff_seconds)

        logger.error("Cluster fetch exhausted retries url=%s error=%s", url, last_error)
        raise UpstreamUnavailableError(f"{url}: request failed after retries") from last_error
