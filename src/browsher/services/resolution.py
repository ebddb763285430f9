"""URL resolution pipeline."""

from pathlib import Path

import structlog

from browsher.config.settings import Settings
from browsher.core.exceptions import BrowsherError, NoFileToOpenError
from browsher.core.models.ref import PinKind, RefSelection
from browsher.core.models.resolution import ResolutionRequest, ResolvedURL
from browsher.git.paths import relative_path
from browsher.git.repository import GitRepository
from browsher.git.runner import GitRunner, SubprocessGitRunner
from browsher.git.url_builder import (
    build_url,
    match_provider,
    merged_providers,
    normalize_remote_url,
)
from browsher.services.lines import select_lines
from browsher.services.notifier import ConsoleNotifier, Notifier
from browsher.services.refs import RefResolver

logger = structlog.get_logger(__name__)

DIRTY_FILE_NOTICE = (
    "File has uncommitted changes. Line numbers were left out of the URL."
)


class URLResolutionService:
    """Resolves a file location into a web URL on the remote host.

    Every call queries git from scratch. The first failure aborts the
    resolution.
    """

    def __init__(
        self,
        settings: Settings,
        runner: GitRunner | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._settings = settings
        self._runner = runner or SubprocessGitRunner()
        self._notifier = notifier or ConsoleNotifier()
        self._providers = merged_providers(settings.providers)

    def resolve(self, request: ResolutionRequest) -> ResolvedURL:
        """Build the URL for ``request`` or raise a ``BrowsherError``."""
        pin = request.pin or self._settings.default_pin
        is_root = pin == PinKind.ROOT
        selection = RefSelection(kind=pin, value=None if is_root else request.ref)

        file_path: Path | None = None
        if request.file_path:
            # The file itself may be a tracked symlink; only its directory is resolved
            file_path = Path(request.file_path).absolute()
            file_path = file_path.parent.resolve() / file_path.name
        elif not is_root:
            raise NoFileToOpenError("No file to open.")

        repository = GitRepository.discover(
            file_path.parent if file_path else None, self._runner
        )

        remote = repository.get_remote(request.remote or self._settings.default_remote)
        base_url = normalize_remote_url(remote.url)
        match_provider(base_url, self._providers)
        log = logger.bind(root=str(repository.root), remote=remote.name, base_url=base_url)

        if is_root:
            log.debug("Linking to repository root")
            return ResolvedURL(
                url=build_url(base_url, selection, None, None, self._providers),
                remote=remote,
                ref=selection,
            )

        relpath = relative_path(file_path, repository.root)
        ref = RefResolver(repository, self._settings).resolve(selection, remote.name)

        state = None
        if request.line_range is not None:
            state = repository.get_file_state(relpath)
        lines = select_lines(
            request.line_range,
            state,
            allow_dirty=self._settings.allow_line_numbers_with_uncommitted_changes,
        )
        if lines.dropped:
            self._notifier.info(DIRTY_FILE_NOTICE)

        url = build_url(base_url, ref, relpath, lines.line_range, self._providers)
        log.debug("Resolved URL", url=url, ref=ref.value, path=relpath)
        return ResolvedURL(
            url=url,
            remote=remote,
            ref=ref,
            relative_path=relpath,
            line_range=lines.line_range,
            anchor_dropped=lines.dropped,
        )

    def run(self, request: ResolutionRequest) -> ResolvedURL | None:
        """Like ``resolve`` but reports a failure once and returns None."""
        try:
            return self.resolve(request)
        except BrowsherError as e:
            logger.debug("Resolution aborted", error=type(e).__name__, details=e.details)
            self._notifier.error(e.message)
            return None
