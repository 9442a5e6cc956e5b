"""CLI entry point: read FIX tagvalue records and print per-account high/low."""

import argparse
import logging
import sys

from py_fix_report.fix_aggregator import TruncatedMessage, aggregate
from py_fix_report.fix_parser import MalformedField
from py_fix_report.fix_report import format_report

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="py-fix-report",
        description="Per-account high/low price report from FIX New Order Single messages",
    )
    parser.add_argument(
        "--input", default=None, help="Read messages from this file instead of stdin"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    diagnostics = sys.stderr.buffer
    try:
        if args.input is None:
            aggregator = aggregate(sys.stdin.buffer, diagnostics)
        else:
            with open(args.input, "rb") as source:
                aggregator = aggregate(source, diagnostics)
    except MalformedField as e:
        logger.error("Malformed field, aborting: %s", e)
        return 1
    except TruncatedMessage as e:
        logger.error("%s; reporting the orders read so far", e)
        _print_report(e.aggregator)
        return 1
    except OSError as e:
        logger.error("Error reading input: %s", e)
        return 1

    _print_report(aggregator)
    return 0


def _print_report(aggregator) -> None:
    diagnostics = sys.stderr.buffer
    diagnostics.flush()
    sys.stdout.flush()
    report = format_report(aggregator.high_low())
    sys.stdout.buffer.write(report.encode("utf-8", errors="surrogateescape"))
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    sys.exit(main())
