"""Sources producing a record store from the clustering service output."""

from segment_explorer.sources.http import ClusterServiceClient
from segment_explorer.sources.json_file import JsonFileSource

__all__ = ["ClusterServiceClient", "JsonFileSource"]
