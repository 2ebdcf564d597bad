"""Custom exception hierarchy for segment-explorer."""


class SegmentExplorerError(Exception):
    """Base exception for all segment-explorer errors."""


class EmptyDatasetError(SegmentExplorerError):
    """Raised when an average or top-key is requested over zero records."""


class InvalidRecordError(SegmentExplorerError):
    """Raised when an upstream record violates the record contract."""


class MissingClusterLabelError(InvalidRecordError):
    """Raised when an upstream record carries no usable cluster label."""


class UpstreamUnavailableError(SegmentExplorerError):
    """Raised when the clustering service fetch fails or returns an error payload."""


class ConfigurationError(SegmentExplorerError):
    """Raised when configuration is invalid or missing."""
