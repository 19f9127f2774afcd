"""Check a suitcase against every airline's carry-on limits and print a JSON report."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from carryon.core.config import settings
from carryon.schemas.report import CheckOutput
from carryon.services.aggregator import evaluate_all
from carryon.services.reference_data import ReferenceDataError, ReferenceDataLoader
from carryon.services.report import generate_report
from carryon.services.suitcase_validation import SuitcaseValidationError, build_suitcase


logger = logging.getLogger(__name__)

EXIT_LOAD_FAILED = 1
EXIT_INVALID_INPUT = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check carry-on compatibility of a suitcase")
    parser.add_argument("--width", required=True, help="Suitcase width (cm)")
    parser.add_argument("--height", required=True, help="Suitcase height (cm)")
    parser.add_argument("--depth", required=True, help="Suitcase depth (cm)")
    parser.add_argument("--weight", default=None, help="Suitcase weight (kg), optional")
    parser.add_argument("--airlines", default=settings.airlines_source, help="Airline table (path or URL)")
    parser.add_argument("--baggage", default=settings.baggage_source, help="Baggage rule table (path or URL)")
    parser.add_argument("--countries", default=settings.countries_source, help="Country table (path or URL)")
    parser.add_argument(
        "--show-incompatible",
        action="store_true",
        help="Include the incompatible airline list in the output",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        suitcase = build_suitcase(args.width, args.height, args.depth, args.weight)
    except SuitcaseValidationError as exc:
        for message in exc.errors:
            logger.error(message)
        return EXIT_INVALID_INPUT

    loader = ReferenceDataLoader(
        sources={"airlines": args.airlines, "baggage": args.baggage, "countries": args.countries}
    )
    try:
        data = loader.load()
    except ReferenceDataError as exc:
        logger.error("Could not load reference data: %s", exc)
        return EXIT_LOAD_FAILED

    results = evaluate_all(suitcase, data)
    report = generate_report(suitcase, results)
    logger.info(
        "%s of %s baggage rules accept the suitcase (%.1f%%)",
        len(results.compatible),
        results.total,
        report.compatibility_rate,
    )

    output = CheckOutput(
        **dict(report),
        compatible=results.compatible,
        incompatible=results.incompatible if args.show_incompatible else None,
    )
    exclude = None if args.show_incompatible else {"incompatible"}
    sys.stdout.write(output.model_dump_json(indent=2, exclude=exclude))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
