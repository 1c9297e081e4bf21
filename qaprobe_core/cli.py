#!/usr/bin/env python3
"""
qaprobe-search - run the Smart TV search scenario from the command line

Usage:
    qaprobe-search [--term "Smart TV"] [--min 2500] [--max 5000] [--expected 3500]
                   [--headed] [--log-dir ./logs] [--screenshot-dir ./screenshots] [--debug]

Exit codes:
    0  products found, all above the expected price
    1  post-condition failed
    2  a readiness wait timed out
    3  any other automation or browser failure
"""

import argparse
import asyncio
import logging
import sys
import time
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from playwright.async_api import Error as PlaywrightError

from qaprobe_logs.run_report import RunReport
from qaprobe_logs.screenshots import cleanup_old_screenshots, get_run_screenshot_dir

from .browser import launch_browser
from .config import Config, config
from .diagnostics import get_logger
from .errors import AutomationError, WaitTimeoutError, describe_error
from .flows import assert_products_above, products_table, search_and_collect
from .models import ProductRecord

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ASSERTION = 1
EXIT_TIMEOUT = 2
EXIT_AUTOMATION = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search the store, filter by price and list products above a threshold",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--term', default=config.search_term, help='Search term')
    parser.add_argument('--min', type=float, default=config.price_min, help='Price filter lower bound')
    parser.add_argument('--max', type=float, default=config.price_max, help='Price filter upper bound')
    parser.add_argument('--expected', type=float, default=config.price_expected,
                        help='Keep products priced above this')
    parser.add_argument('--headed', action='store_true', help='Show the browser window')
    parser.add_argument('--log-dir', default=str(config.log_dir), help='Directory for the run report')
    parser.add_argument('--screenshot-dir', default=str(config.screenshot_dir), help='Base directory for screenshots')
    parser.add_argument('--debug', action='store_true', default=config.enable_debug, help='Verbose logging')
    return parser


def config_from_args(args, base: Config = config) -> Config:
    return replace(
        base,
        search_term=args.term,
        price_min=args.min,
        price_max=args.max,
        price_expected=args.expected,
        headless=not args.headed,
        log_dir=Path(args.log_dir),
        screenshot_dir=Path(args.screenshot_dir),
        enable_debug=args.debug,
    )


def _setup_logging(debug: bool) -> None:
    for name in ("qaprobe_core", "qaprobe_api", "qaprobe_logs"):
        lg = get_logger(name)
        if debug:
            lg.setLevel(logging.DEBUG)
            for handler in lg.handlers:
                handler.setLevel(logging.DEBUG)


def _create_report(cfg: Config) -> RunReport:
    run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
    domain = urlparse(cfg.web_base_url).netloc or "local"
    cleanup_old_screenshots(cfg.screenshot_dir)
    return RunReport(
        title=f"Search: {cfg.search_term}",
        url=cfg.web_base_url,
        log_dir=cfg.log_dir,
        screenshot_dir=get_run_screenshot_dir(cfg.screenshot_dir, domain, run_id),
        session_id=run_id,
    )


async def _run(cfg: Config, report: RunReport) -> List[ProductRecord]:
    async with launch_browser(cfg) as driver:
        return await search_and_collect(driver, cfg, evidence=report)


def _log_parameters(report: RunReport, cfg: Config) -> None:
    report.log_heading("Parameters")
    report.log_kv("Search term", cfg.search_term)
    report.log_kv("Price filter", cfg.price_range().value_label())
    report.log_kv("Expected price", cfg.price_expected)
    report.log_kv("Headless", cfg.headless)
    report.log_text("")
    if not cfg.price_range().is_coherent():
        report.log_warning("Expected price is below the filter minimum; every filtered product will pass")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)
    _setup_logging(cfg.enable_debug)
    report = _create_report(cfg)
    _log_parameters(report, cfg)
    started = time.monotonic()

    try:
        products = asyncio.run(_run(cfg, report))
        assert_products_above(products, cfg.price_expected)
    except WaitTimeoutError as e:
        logger.error(f"Timed out: {e}")
        report.log_error(str(e))
        report.finalize(success=False, duration_ms=_elapsed_ms(started), error=str(e))
        return EXIT_TIMEOUT
    except AssertionError as e:
        logger.error(str(e))
        report.log_error(str(e))
        report.finalize(success=False, duration_ms=_elapsed_ms(started), error=str(e))
        return EXIT_ASSERTION
    except (AutomationError, PlaywrightError) as e:
        logger.error(f"Run failed: {e}")
        report.log_error(str(e))
        report.log_json(describe_error(e), title="Error details")
        report.finalize(success=False, duration_ms=_elapsed_ms(started), error=str(e))
        return EXIT_AUTOMATION

    print(f"\n=== PRODUTOS COM VALOR ACIMA DE R${cfg.price_expected} ===\n")
    for product in products:
        print(product)
        print("-" * 40)

    report.log_heading("Products")
    report.log_text(products_table(products))
    report.log_json([p.to_dict() for p in products], title="Products (JSON)")
    report.log_success(f"{len(products)} products above R${cfg.price_expected}")
    report.finalize(success=True, duration_ms=_elapsed_ms(started))
    logger.info(f"Report written to: {report.log_path}")
    return EXIT_OK


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


if __name__ == "__main__":
    sys.exit(main())
