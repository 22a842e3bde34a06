from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from calc_report.core.config import get_settings
from calc_report.core.exceptions import AppError
from calc_report.core.logging import configure_logging
from calc_report.services.report_job import ReportJob


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Evaluate the named arithmetic operations in a JSON file and write a sorted report."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Path to the JSON file with the operations (default: input.json).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path of the text report to write (default: output.txt).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.resolved_log_level)

    job = ReportJob.from_settings(settings)
    if args.input is not None:
        job.input_path = args.input
    if args.output is not None:
        job.output_path = args.output

    try:
        job.run()
    except AppError as exc:
        print(exc.console_message())
        return exc.exit_code

    print(f"Results written to {job.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
