"""
CLI entry point for the cross-selling analytics report.

Runs against a repository loaded with the demo data set.

Usage:
    python -m salonassist.analytics.run_report --verbose
    python -m salonassist.analytics.run_report --report report.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from salonassist.analytics.metrics import calculate_for_repository
from salonassist.store.repository import create_repository

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print cross-selling KPIs for the salon demo data."
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Path to write the analytics report (default: stdout).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output.",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    repo = create_repository(seed=True)
    calculator, metrics = calculate_for_repository(repo)

    if metrics.completed_visits == 0:
        logger.warning("No completed visits found, report will be empty")

    output = calculator.format_report(metrics)

    if args.report:
        report_path = Path(args.report)
        report_path.write_text(output, encoding="utf-8")
        logger.info("Report written to %s", report_path)
    else:
        sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
