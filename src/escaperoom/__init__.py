"""A single-room text adventure played on the console."""

from .app import create_app
from .config import Config
from .logging import configure_logging, get_logger

__all__ = ["main", "create_app", "Config"]


def main() -> None:
    """Entry point for the escape room."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        log_level=config.log_level,
        data_file=str(config.data_file) if config.data_file else None,
    )

    app = create_app(config)
    app.run()
