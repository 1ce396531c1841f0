"""Application entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from movie_rental.config import DEFAULT_LOG_LEVEL, AppConfig
from movie_rental.logging_config import configure_logging, get_logger
from movie_rental.seed import seed_demo_data
from movie_rental.ui.app_services import AppServices
from movie_rental.ui.console import ConsoleApp
from movie_rental.version import __version__


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="movie-rental", description="Interactive movie rental manager"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty catalog and no customers.",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level for the log file.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def build_services(config: AppConfig) -> AppServices:
    services = AppServices.create(config)
    if config.seed_demo_data:
        seed_demo_data(services.rental_service)
    return services


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the MovieRental console session."""
    args = _parse_args(argv)
    config = AppConfig(log_level=args.log_level, seed_demo_data=not args.no_seed)
    configure_logging(config.log_level)
    logger = get_logger(__name__)
    logger.info("Starting %s %s", config.app_name, __version__)

    services = build_services(config)
    exit_code = ConsoleApp(services).run()
    logger.info("Exiting with code %s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
