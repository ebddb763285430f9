"""User-facing notifications."""

from typing import Protocol

import click
import structlog

logger = structlog.get_logger(__name__)


class Notifier(Protocol):
    """Reports leveled messages to whoever triggered the resolution."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleNotifier:
    """Writes notifications to stderr and the log."""

    def info(self, message: str) -> None:
        logger.info("Notice", message=message)
        click.echo(message, err=True)

    def error(self, message: str) -> None:
        logger.debug("Resolution failed", message=message)
        click.echo(f"Error: {message}", err=True)
