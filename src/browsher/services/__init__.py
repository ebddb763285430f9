"""Business logic services for browsher."""

from browsher.services.lines import LineSelection, select_lines
from browsher.services.notifier import ConsoleNotifier, Notifier
from browsher.services.opener import open_url
from browsher.services.refs import RefResolver
from browsher.services.resolution import URLResolutionService

__all__ = [
    "ConsoleNotifier",
    "LineSelection",
    "Notifier",
    "RefResolver",
    "URLResolutionService",
    "open_url",
    "select_lines",
]
