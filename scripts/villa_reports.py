#!/usr/bin/env python3
"""
Print villa reconciliation and progress reports as JSON.

Connects to the database named in the active configuration (or --db-url)
and renders one report to stdout.

Usage:
    python3 scripts/villa_reports.py daily --company-id <uuid> --date 2024-03-15
    python3 scripts/villa_reports.py range --company-id <uuid> --start 2024-03-01 --end 2024-03-07
    python3 scripts/villa_reports.py summary --company-id <uuid> [--date 2024-03-15]
    python3 scripts/villa_reports.py dashboard [--range today|month]
    python3 scripts/villa_reports.py chart [--months 6]
    python3 scripts/villa_reports.py progress --company-id <uuid>
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from uuid import UUID

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render villa reconciliation and progress reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python3 scripts/villa_reports.py daily --company-id a1b2... --date 2024-03-15\n"
            "  python3 scripts/villa_reports.py dashboard --range today\n"
        ),
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a configuration YAML (default: villa_config/sets/default.yaml)",
    )
    parser.add_argument(
        "--db-url", type=str, default=None,
        help="Database URL overriding the configured one",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Emit structured logs to stderr",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    daily = sub.add_parser("daily", help="Detailed cash-flow report of one day")
    daily.add_argument("--company-id", type=UUID, required=True)
    daily.add_argument("--date", type=str, required=True, help="YYYY-MM-DD")

    rng = sub.add_parser("range", help="One detailed report per day of a range")
    rng.add_argument("--company-id", type=UUID, required=True)
    rng.add_argument("--start", type=str, required=True, help="YYYY-MM-DD")
    rng.add_argument("--end", type=str, required=True, help="YYYY-MM-DD")

    summary = sub.add_parser("summary", help="Per-store totals of one day")
    summary.add_argument("--company-id", type=UUID, required=True)
    summary.add_argument("--date", type=str, default=None, help="YYYY-MM-DD (default: today)")

    dashboard = sub.add_parser("dashboard", help="Coarse income/expense points")
    dashboard.add_argument("--range", choices=("today", "month"), default="month")

    chart = sub.add_parser("chart", help="Monthly income vs petty-cash chart")
    chart.add_argument("--months", type=int, default=None)

    progress = sub.add_parser("progress", help="Construction progress of every villa")
    progress.add_argument("--company-id", type=UUID, required=True)

    return parser


def run(args, session, config):
    from villa_kernel.domain.clock import SystemClock
    from villa_modules.progress.config import ProgressConfig
    from villa_modules.progress.service import ProgressService
    from villa_modules.reporting.config import ReportingConfig
    from villa_modules.reporting.dashboard import DashboardService
    from villa_modules.reporting.service import ReportingService

    reporting_config = ReportingConfig.from_villa_config(config)
    clock = SystemClock()

    if args.command in ("daily", "range", "summary"):
        svc = ReportingService(session, config=reporting_config, clock=clock)
        if args.command == "daily":
            result = svc.daily_report(args.company_id, args.date)
        elif args.command == "range":
            result = svc.range_report(args.company_id, args.start, args.end)
        else:
            result = svc.daily_summary(args.company_id, args.date)
        return svc.to_dict(result)

    if args.command in ("dashboard", "chart"):
        svc = DashboardService(session, config=reporting_config, clock=clock)
        if args.command == "dashboard":
            return svc.to_dict(svc.monthly_summary(args.range))
        return svc.to_dict(svc.chart_data(args.months))

    svc = ProgressService(session, config=ProgressConfig.from_villa_config(config))
    return svc.to_dict(svc.progress_summary(args.company_id))


def main() -> int:
    args = build_parser().parse_args()

    if not args.verbose:
        logging.disable(logging.CRITICAL)

    from villa_config import get_active_config
    from villa_kernel.db.engine import init_engine_from_url, session_scope
    from villa_kernel.exceptions import VillaKernelError

    try:
        config = get_active_config(args.config)
    except VillaKernelError as exc:
        print(f"  ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        init_engine_from_url(args.db_url or config.database.url, echo=config.database.echo)
    except Exception as exc:
        print(f"  ERROR: Cannot connect to database: {exc}", file=sys.stderr)
        return 1

    try:
        with session_scope() as session:
            payload = run(args, session, config)
    except VillaKernelError as exc:
        print(f"  ERROR [{exc.code}]: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
