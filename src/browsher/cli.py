"""Command-line interface for browsher."""

import sys

import click
import structlog

from browsher.config.logging import configure_logging
from browsher.core.exceptions import BrowsherError
from browsher.core.models.lines import LineRange
from browsher.core.models.ref import PinKind
from browsher.core.models.resolution import ResolutionRequest, ResolvedURL

logger = structlog.get_logger(__name__)

PIN_CHOICES = [kind.value for kind in PinKind]


def _parse_lines(ctx: click.Context, param: click.Parameter, value: str | None) -> LineRange | None:
    if value is None:
        return None
    try:
        return LineRange.parse(value)
    except ValueError as e:
        raise click.BadParameter(f"expected N or N-M with line numbers from 1, got {value!r}") from e


def resolution_options(func):
    """Arguments shared by the commands that resolve a URL."""
    func = click.option("--remote", "-r", default=None, help="Remote name (default: configured or first remote)")(func)
    func = click.option(
        "--lines", "-l", default=None, callback=_parse_lines, help="Line or range to anchor, e.g. 10 or 10-20"
    )(func)
    func = click.option("--file", "-f", "file_path", default=None, help="File to link to")(func)
    func = click.argument("ref", required=False)(func)
    func = click.argument("pin", required=False, type=click.Choice(PIN_CHOICES))(func)
    return func


def _resolve(ctx: click.Context, pin, ref, file_path, lines, remote) -> ResolvedURL:
    from browsher.services.resolution import URLResolutionService

    request = ResolutionRequest(
        file_path=file_path,
        pin=PinKind(pin) if pin else None,
        ref=ref,
        line_range=lines,
        remote=remote,
    )
    service = URLResolutionService(ctx.obj["settings"])
    resolved = service.run(request)
    if resolved is None:
        sys.exit(1)
    return resolved


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """browsher: link to files in a Git repository on the web."""
    from browsher.config.settings import get_settings
    from browsher.git.runner import ensure_git_available

    try:
        settings = get_settings()
    except BrowsherError as e:
        configure_logging(log_level="DEBUG" if verbose else "INFO")
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand != "providers":
        try:
            ensure_git_available()
        except BrowsherError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

    ctx.obj = {"settings": settings}


@cli.command()
@resolution_options
@click.pass_context
def url(ctx: click.Context, pin, ref, file_path, lines, remote) -> None:
    """Print the URL for a file.

    PIN is one of branch, tag, commit or root. REF pins an explicit
    commit, branch or tag instead of resolving one.
    """
    resolved = _resolve(ctx, pin, ref, file_path, lines, remote)
    click.echo(resolved.url)


@cli.command(name="open")
@resolution_options
@click.pass_context
def open_(ctx: click.Context, pin, ref, file_path, lines, remote) -> None:
    """Open the URL for a file in a browser."""
    from browsher.services.opener import open_url

    resolved = _resolve(ctx, pin, ref, file_path, lines, remote)
    click.echo(resolved.url)
    try:
        open_url(resolved.url, ctx.obj["settings"].open_cmd)
    except BrowsherError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def providers(ctx: click.Context) -> None:
    """List the hosts browsher can link to."""
    from browsher.git.url_builder import BUILTIN_PROVIDERS, merged_providers

    user = ctx.obj["settings"].providers
    for host, template in sorted(merged_providers(user).items()):
        source = "user" if host in user else "built-in"
        click.echo(f"{host} ({source})")
        click.echo(f"  url:    {template.url_template}")
        click.echo(f"  line:   {template.single_line_format}")
        click.echo(f"  range:  {template.multi_line_format}")
        if host in user and host in BUILTIN_PROVIDERS:
            click.echo("  overrides built-in template")


if __name__ == "__main__":
    cli()
