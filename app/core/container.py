"""
Dependency container.

Holds the process-wide collaborators (settings, logger) that are handed
by reference to every repository and use case constructor. The database
engine is not part of the container: only the repository layer needs it.
"""

import logging
from dataclasses import dataclass

from app.core.config import Settings

APP_LOGGER_NAME = "app"


@dataclass(frozen=True)
class Container:
    """Read-only bundle of shared dependencies.

    Attributes:
        settings: Application settings.
        logger: Root application logger; components derive child loggers from it.
    """

    settings: Settings
    logger: logging.Logger

    def get_logger(self, name: str) -> logging.Logger:
        """Return a child of the application logger."""
        return self.logger.getChild(name)


def build_container(settings: Settings) -> Container:
    """Build the container once per application instance."""
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.info("Welcome to %s %s!", settings.project_name, settings.version)
    return Container(settings=settings, logger=logger)
