"""Deciding whether a line anchor can be trusted."""

from dataclasses import dataclass

from browsher.core.exceptions import FileNotTrackedError
from browsher.core.models.lines import LineRange
from browsher.core.models.repository import FileState


@dataclass(frozen=True)
class LineSelection:
    """Outcome of line selection.

    ``dropped`` is set when a requested range was discarded because the
    file has uncommitted changes.
    """

    line_range: LineRange | None
    dropped: bool = False


def select_lines(
    line_range: LineRange | None,
    state: FileState | None,
    allow_dirty: bool = False,
) -> LineSelection:
    """Apply the anchoring policy to a requested line range."""
    if line_range is None:
        return LineSelection(line_range=None)

    if state is None or not state.tracked:
        raise FileNotTrackedError(
            "File is not tracked by Git. Cannot link to line numbers.",
        )

    if state.dirty and not allow_dirty:
        return LineSelection(line_range=None, dropped=True)

    return LineSelection(line_range=line_range)
