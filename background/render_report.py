#!/usr/bin/env python3
"""
Builds the status dashboard once and prints it as JSON.
Run this script from cron to publish a static snapshot.
"""

import argparse
import asyncio
import logging
import sys
import os

# Add the parent directory to the path so we can import from the project
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.report_builder import ReportBuilder
from services.service_config import ServiceConfigError
from services.settings import StatusSettings

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render-report",
        description="Print the 30-day status dashboard as JSON.",
    )
    parser.add_argument("--env", help="production, sandbox or live-test")
    parser.add_argument("--partner-id", help="palla.app or test.partner")
    parser.add_argument("--config", help="Service config path or URL (overrides STATUS_CONFIG_SOURCE)")
    parser.add_argument("--logs", help="Log directory or base URL (overrides STATUS_LOG_SOURCE)")
    return parser

async def render_report(args: argparse.Namespace) -> str:
    settings = StatusSettings()
    if args.config:
        settings.config_source = args.config
    if args.logs:
        settings.log_source = args.logs

    builder = ReportBuilder(settings=settings)
    report = await builder.build_dashboard(env=args.env, partner_id=args.partner_id)
    return report.model_dump_json(indent=2)

def main(argv=None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    try:
        print(asyncio.run(render_report(args)))
    except ServiceConfigError as e:
        logger.error("%s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
