"""Opening a URL in a browser."""

import shlex
import subprocess

import click
import structlog

from browsher.core.exceptions import OpenCommandError

logger = structlog.get_logger(__name__)


def open_url(url: str, open_cmd: str | None = None) -> None:
    """Open ``url`` with ``open_cmd`` or the platform's default handler.

    The URL is always appended as its own argument.
    """
    if open_cmd:
        command = [*shlex.split(open_cmd), url]
        logger.debug("Opening URL", command=command)
        try:
            subprocess.run(command, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise OpenCommandError(
                f"Open command not found: {command[0]}",
                details={"open_cmd": open_cmd},
            ) from e
        except subprocess.CalledProcessError as e:
            raise OpenCommandError(
                f"Open command failed: {e.stderr.strip() or e.returncode}",
                details={"open_cmd": open_cmd, "returncode": e.returncode},
            ) from e
        return

    logger.debug("Opening URL with default handler", url=url)
    if click.launch(url) != 0:
        raise OpenCommandError(f"Could not open URL: {url}")
