"""Pure filtering and aggregation over in-memory customer records."""

from segment_explorer.engine.aggregation import average, count_by, top_key
from segment_explorer.engine.filtering import filter_records
from segment_explorer.engine.summary import SummaryFacade

__all__ = ["SummaryFacade", "average", "count_by", "filter_records", "top_key"]
