"""Ref resolution for each pin kind."""

import structlog

from browsher.config.settings import Settings
from browsher.core.models.ref import PinKind, RefSelection
from browsher.git.repository import GitRepository

logger = structlog.get_logger(__name__)


class RefResolver:
    """Turns a requested pin into the concrete ref embedded in a URL.

    Fallback order per pin kind:

    - branch: explicit value, configured default branch, current branch,
      the remote's default branch
    - tag: explicit value, latest reachable tag
    - commit: explicit value (used verbatim), HEAD hash cut to
      ``commit_length`` when configured
    - root: no ref
    """

    def __init__(self, repository: GitRepository, settings: Settings) -> None:
        self._repository = repository
        self._settings = settings

    def resolve(self, selection: RefSelection | None, remote_name: str) -> RefSelection:
        if selection is None:
            selection = RefSelection(kind=self._settings.default_pin)

        if selection.kind == PinKind.ROOT:
            return selection
        if selection.kind == PinKind.BRANCH:
            value = selection.value or self._resolve_branch(remote_name)
        elif selection.kind == PinKind.TAG:
            value = selection.value or self._repository.get_latest_tag()
        else:
            value = selection.value or self._resolve_commit()

        logger.debug("Resolved ref", kind=selection.kind.value, ref=value)
        return RefSelection(kind=selection.kind, value=value)

    def _resolve_branch(self, remote_name: str) -> str:
        if self._settings.default_branch:
            return self._settings.default_branch

        current = self._repository.get_current_ref()
        if current.is_branch:
            return current.value

        return self._repository.get_default_branch(remote_name)

    def _resolve_commit(self) -> str:
        commit = self._repository.get_commit_hash(full=True)
        if self._settings.commit_length:
            commit = commit[: self._settings.commit_length]
        return commit
