"""Command-line interface for the shift calendar."""

import argparse
import logging
import sys
from datetime import date
from typing import Optional

from shiftcal.domain.calendar import format_full_date, parse_date_key
from shiftcal.domain.models import ShiftType
from shiftcal.exceptions import ShiftCalError
from shiftcal.output.pdf_generator import PDFGenerator
from shiftcal.output.text_report import TextReportGenerator
from shiftcal.scheduling.service import ScheduleService
from shiftcal.validation.validator import ScheduleValidator

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_month(value: str) -> date:
    """Parse ``YYYY-MM`` into the first day of that month."""
    return parse_date_key(f"{value}-01")


def build_service(demo: bool, assignments: list[str]) -> ScheduleService:
    """Create a service and apply ``KEY=SHIFT`` assignments."""
    service = ScheduleService.demo() if demo else ScheduleService()
    for assignment in assignments:
        key, sep, shift = assignment.partition("=")
        if not sep:
            raise ShiftCalError(f"Expected KEY=SHIFT, got {assignment!r}")
        shift_type = ShiftType.coerce(shift.strip())
        service.update_override(
            key.strip(),
            lambda previous, shift_type=shift_type: {**(previous or {}), "shift": shift_type},
        )
    return service


def run_month(service: ScheduleService, month: str) -> None:
    """Print the month calendar."""
    print(TextReportGenerator().month_to_string(service, parse_month(month)))


def run_day(service: ScheduleService, key: str) -> None:
    """Print the resolved schedule for one day and any validation findings."""
    schedule = service.get_schedule_for_date(key)

    print(format_full_date(schedule.date))
    print(f"  Shift: {schedule.config.label}")
    if schedule.shift_time:
        print(f"  Time: {schedule.shift_time}")
    if schedule.colleagues:
        print(f"  Colleagues: {', '.join(schedule.colleagues)}")
    for task in schedule.tasks:
        when = f" ({task.time_range})" if task.time_range else ""
        print(f"  Task: {task.title}{when}")
    if schedule.notes:
        print(f"  Notes: {schedule.notes}")
    print(f"  Customized: {'yes' if service.store.has_override(key) else 'no'}")

    result = ScheduleValidator().validate(schedule, service.colleague_pool)
    for warning in result.warnings:
        print(f"  Warning: {warning}")
    for error in result.errors:
        print(f"  Error: {error}")


def run_stats(
    service: ScheduleService,
    year: int,
    month: Optional[int],
    output: Optional[str],
) -> None:
    """Print or export yearly statistics."""
    if output and output.lower().endswith(".pdf"):
        PDFGenerator().generate(service, year, output, month=month)
        print(f"PDF saved to: {output}")
        return

    generator = TextReportGenerator()
    if output:
        generator.generate_stats(service, year, output, month=month)
        print(f"Report saved to: {output}")
    else:
        print(generator.stats_to_string(service, year, month))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="shiftcal - Personal Shift Calendar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s month 2025-09                      Show the September 2025 calendar
  %(prog)s --demo day 2025-09-09              Show one day of the demo data
  %(prog)s -s 2025-09-10=early stats 2025     Yearly statistics with one early shift
  %(prog)s stats 2025 --month 9 -o stats.pdf  Export statistics as PDF
        """,
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Load demo seed dates and demo colleagues",
    )
    parser.add_argument(
        "--shift", "-s",
        action="append",
        default=[],
        metavar="KEY=SHIFT",
        help="Assign a shift (early, mid, late, off) to a date; repeatable",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    month_parser = subparsers.add_parser("month", help="Show a month calendar")
    month_parser.add_argument("month", type=str, help="Month as YYYY-MM")

    day_parser = subparsers.add_parser("day", help="Show a single day")
    day_parser.add_argument("key", type=str, help="Date as YYYY-MM-DD")

    stats_parser = subparsers.add_parser("stats", help="Show yearly statistics")
    stats_parser.add_argument("year", type=int, help="Year to summarize")
    stats_parser.add_argument(
        "--month", "-m",
        type=int,
        choices=range(1, 13),
        metavar="MONTH",
        help="Include the weekday pattern for this month (1-12)",
    )
    stats_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output file (.pdf for PDF, anything else for text)",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        service = build_service(args.demo, args.shift)
        if args.command == "month":
            run_month(service, args.month)
        elif args.command == "day":
            run_day(service, args.key)
        elif args.command == "stats":
            run_stats(service, args.year, args.month, args.output)
    except ShiftCalError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
