"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from movie_rental.version import __app_name__, __company__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "MovieRental"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "movie_rental.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

DIGITAL_BASE_FEE = 5.0
PHYSICAL_BASE_FEE = 10.0
GRACE_PERIOD_DAYS = 3
LATE_FEE_PER_DAY = 2.0
CURRENCY_LABEL = "RM"


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for MovieRental."""

    app_name: str = APP_NAME
    organization_name: str = __company__
    currency_label: str = CURRENCY_LABEL
    log_level: str = DEFAULT_LOG_LEVEL
    seed_demo_data: bool = True
