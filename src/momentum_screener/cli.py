"""
Command-line entry point: run one screen and print the report as JSON.

Usage:
    momentum-screen --config config/default.yaml
    momentum-screen --config config/default.yaml --profile aggressive --mock
    momentum-screen --symbols NVDA AMD PLTR --sorted
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests
from pydantic import ValidationError

from momentum_screener import configure_logging
from momentum_screener.adapters.console_logger import ConsoleAuditLogger
from momentum_screener.config.loader import ConfigLoader, ConfigurationError
from momentum_screener.config.models import PipelineSettings, ScreeningConfig
from momentum_screener.factory import create_pipeline
from momentum_screener.resilience.error_handler import ProviderUnavailable

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Screen equities for top tier and emerging momentum candidates"
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--profile", default=None, help="Profile under config/profiles/")
    parser.add_argument("--symbols", nargs="+", default=None, help="Screen these tickers only")
    parser.add_argument("--limit", type=int, default=None, help="Override symbol_limit")
    parser.add_argument("--mock", action="store_true", help="Use the mock data provider")
    parser.add_argument("--sorted", action="store_true", help="Sort buckets by symbol")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every rejection")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ScreeningConfig:
    """
    Load the config file (if any), apply env and command-line overrides.

    Raises:
        ConfigurationError: If an override is invalid, or a profile is
            requested without a config file
    """
    config_path: Optional[Path] = args.config
    if args.profile and config_path is None:
        raise ConfigurationError("--profile requires --config")

    loader = ConfigLoader(base_path=config_path.parent.parent if config_path else None)
    if config_path is not None:
        config = loader.load(config_path.resolve(), profile=args.profile)
    else:
        config = ScreeningConfig()
    config = loader.apply_env_overrides(config)

    updates = {}
    if args.limit is not None:
        updates["symbol_limit"] = args.limit
    if args.sorted:
        updates["sort_by_symbol"] = True
    try:
        pipeline = PipelineSettings.model_validate(
            {**config.pipeline.model_dump(), **updates}
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command-line override: {e}") from e

    provider = config.provider
    if args.mock:
        provider = provider.model_copy(update={"kind": "mock"})
    return config.model_copy(update={"pipeline": pipeline, "provider": provider})


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_config(args)
    except (ConfigurationError, FileNotFoundError) as e:
        logger.error(f"Cannot start: {e}")
        return 2

    with requests.Session() as session:
        try:
            audit_logger = ConsoleAuditLogger(verbose=args.verbose, stream=sys.stderr)
            pipeline, symbol_source = create_pipeline(
                config, audit_logger=audit_logger, session=session
            )
        except ConfigurationError as e:
            logger.error(f"Cannot start: {e}")
            return 2

        try:
            report = pipeline.screen(args.symbols or symbol_source)
        except ProviderUnavailable as e:
            logger.error(f"Cannot list symbols: {e}")
            return 1

    payload = json.dumps(report.to_dict(), indent=2)
    if args.output:
        args.output.write_text(payload, encoding="utf-8")
        logger.info(f"Report written to {args.output}")
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
