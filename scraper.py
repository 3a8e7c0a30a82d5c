#!/usr/bin/env python3
"""
HVAC Component Scraper

Single-pass batch job: for each manufacturer in Manufacturer.json, render its
website with Playwright, ask Claude for HVAC product listings, reconcile them
against component_types.json and save one JSON file per manufacturer.

Usage:
    python scraper.py
    python scraper.py --only "Carrier" --only "Lennox" --headed
    python scraper.py --output-dir output/components --log-file output/run.log
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from component_scraper.errors import ConfigError, DataLoadError
from component_scraper.extraction import ExtractionOracle
from component_scraper.models import Manufacturer
from component_scraper.orchestrator import ComponentScraper
from component_scraper.reference_data import load_component_types, load_manufacturers
from component_scraper.renderer import PlaywrightRenderer
from component_scraper.sink import ComponentSink, ensure_output_directory
from config import ScraperConfig

logger = logging.getLogger("component_scraper")

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(message)s'


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrape HVAC component listings from manufacturer websites"
    )
    parser.add_argument("--manufacturers", type=Path, help="Path to Manufacturer.json")
    parser.add_argument("--component-types", type=Path, help="Path to component_types.json")
    parser.add_argument("--output-dir", type=Path, help="Directory for *_components.json files")
    parser.add_argument(
        "--only",
        action="append",
        default=[],
        metavar="NAME",
        help="Only process this manufacturer (case-insensitive, repeatable)",
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--log-file", type=Path, help="Also write log output to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def apply_overrides(config: ScraperConfig, args: argparse.Namespace) -> ScraperConfig:
    """Command-line flags win over environment settings"""
    overrides = {}
    if args.manufacturers:
        overrides["manufacturers_file"] = args.manufacturers
    if args.component_types:
        overrides["component_types_file"] = args.component_types
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.headed:
        overrides["headless"] = False
    return dataclasses.replace(config, **overrides)


def select_manufacturers(manufacturers: List[Manufacturer], names: Sequence[str]) -> List[Manufacturer]:
    """Filter by name (case-insensitive). No names means all of them."""
    if not names:
        return manufacturers
    wanted = {name.lower() for name in names}
    return [m for m in manufacturers if m.name.lower() in wanted]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        config = apply_overrides(ScraperConfig.from_env(), args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        output_dir = ensure_output_directory(config.output_dir)
    except OSError as e:
        logger.error(f"Error creating output directory {config.output_dir}: {e}")
        return 1

    try:
        manufacturers = load_manufacturers(config.manufacturers_file)
        component_types = load_component_types(config.component_types_file)
    except DataLoadError as e:
        logger.error(f"Error loading reference data: {e}")
        return 1

    manufacturers = select_manufacturers(manufacturers, args.only)
    if args.only and not manufacturers:
        logger.warning(f"No manufacturers matched --only {args.only}")

    try:
        with PlaywrightRenderer(config) as renderer:
            scraper = ComponentScraper(
                renderer=renderer,
                oracle=ExtractionOracle(config),
                sink=ComponentSink(output_dir),
                component_types=component_types,
                max_tokens=config.oracle_max_tokens,
            )
            scraper.run_batch(manufacturers)
    except Exception:
        logger.exception("Fatal error")
        return 1

    return 0


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
