#!/usr/bin/env python3
"""Generate a sample clustered dataset in the clustering service wire format.

The output file can be fed to ``summarize.py --file`` or served in place of
the clustering service for local development.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from segment_explorer.config import ExplorerConfig
from segment_explorer.generators import CustomerRecordGenerator
from segment_explorer.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(config: ExplorerConfig) -> argparse.Namespace:
    default_seed = config.seed if config.seed is not None else 42
    parser = argparse.ArgumentParser(description="Generate a sample clustered customer dataset")
    parser.add_argument("--count", type=int, default=500, help="Number of records (default: 500)")
    parser.add_argument("--clusters", type=int, default=4, help="Number of clusters (default: 4)")
    parser.add_argument("--seed", type=int, default=default_seed, help=f"Random seed (default: {default_seed})")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("local/clusters.json"),
        help="Output file (default: local/clusters.json)",
    )
    return parser.parse_args()


def main() -> None:
    config = ExplorerConfig.from_env()
    args = parse_args(config)
    setup_logging(level=config.log_level)

    generator = CustomerRecordGenerator(seed=args.seed, n_clusters=args.clusters)
    payload = generator.generate_payload(args.count)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    logger.info("Saved %d records to %s", len(payload), args.output)


if __name__ == "__main__":
    main()
