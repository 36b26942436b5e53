import logging

from progress_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger.

    Library modules only create loggers; the entry point (app factory or a
    script) decides where records go. Defaults to `settings.log_level`.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
