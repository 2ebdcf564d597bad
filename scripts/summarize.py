#!/usr/bin/env python3
"""Load a clustered dataset and print the dashboard summary as JSON.

Examples::

    python scripts/summarize.py --file local/clusters.json --cluster 1
    python scripts/summarize.py --url http://localhost:5000 --location Texas
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from segment_explorer.config import ExplorerConfig
from segment_explorer.engine import SummaryFacade
from segment_explorer.exceptions import (
    EmptyDatasetError,
    InvalidRecordError,
    SegmentExplorerError,
    UpstreamUnavailableError,
)
from segment_explorer.logging import get_logger, setup_logging
from segment_explorer.models import ALL, FilterCriteria
from segment_explorer.serialization import summary_to_dict
from segment_explorer.sources import ClusterServiceClient, JsonFileSource

logger = get_logger(__name__)

EXIT_NO_DATA = 2
EXIT_EMPTY = 3
EXIT_INVALID = 4


def parse_args(config: ExplorerConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a clustered customer dataset")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Clustering service base URL (default: CLUSTER_SERVICE_URL)")
    source.add_argument("--file", type=Path, help="Read the dataset from a JSON file")
    parser.add_argument("--cluster", default=ALL, help="Segment to focus on (default: all)")
    parser.add_argument("--location", default=ALL, help="Location to filter table rows by (default: all)")
    parser.add_argument(
        "--limit",
        type=int,
        default=config.view.table_limit,
        help=f"Maximum table rows (default: {config.view.table_limit})",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on the first invalid record")
    parser.add_argument("--log-format", choices=["standard", "json"], default="standard")
    return parser.parse_args()


def main() -> int:
    try:
        config = ExplorerConfig.from_env()
    except SegmentExplorerError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    args = parse_args(config)
    setup_logging(level=config.log_level, format_type=args.log_format)
    if args.limit < 0:
        logger.error("--limit must be >= 0, got %d", args.limit)
        return 1

    if args.url:
        config.upstream.base_url = args.url
    strict = args.strict or config.view.strict_ingestion
    source = JsonFileSource(args.file) if args.file else ClusterServiceClient(config.upstream)

    try:
        criteria = FilterCriteria.from_selection(args.cluster, args.location)
    except ValueError:
        logger.error("Cluster must be an integer or 'all', got %r", args.cluster)
        return 1

    try:
        store = source.load(strict=strict)
        summary = SummaryFacade(store).summarize(criteria, limit=args.limit)
    except UpstreamUnavailableError as exc:
        logger.error("No dataset loaded: %s", exc)
        return EXIT_NO_DATA
    except InvalidRecordError as exc:
        logger.error("Invalid record in dataset: %s", exc)
        return EXIT_INVALID
    except EmptyDatasetError as exc:
        logger.error("No records in scope: %s", exc)
        return EXIT_EMPTY

    output = summary_to_dict(summary)
    output["quarantined"] = len(store.quarantined)
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
