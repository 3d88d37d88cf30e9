"""Command-line front-end so shell scripts can emit the same diagnostics."""

import os

import click

from . import __version__
from .reporter import Reporter

# C int, the range os.strerror accepts
_ERRNO_RANGE = click.IntRange(-(2**31), 2**31 - 1)

_name_option = click.option(
    "--name", "-n", default=None, metavar="NAME",
    help="Program name to prefix the message with (default: cerm).",
)
_errno_option = click.option(
    "--errno", "-e", "errno_value", type=_ERRNO_RANGE, default=None, metavar="ERRNO",
    help="Append the description of this errno value, as warn(3)/err(3) do.",
)


def _reporter(name: str | None) -> Reporter:
    if name is None:
        name = click.get_current_context().find_root().info_name
    return Reporter(prog_name=name)


def _message(words: tuple[str, ...]) -> str:
    # Words are printed as given; no template substitution from the shell.
    return " ".join(words)


@click.group()
@click.version_option(version=__version__, prog_name="cerm")
def main() -> None:
    """Print BSD-style diagnostics to standard error.

    \b
    Examples
    --------
        cerm warn -n backup "skipping $dir"
        cerm err 2 -n backup -e 28 "cannot write $file"
    """


@main.command()
@_name_option
@_errno_option
@click.argument("words", metavar="[MESSAGE ...]", nargs=-1)
def warn(name: str | None, errno_value: int | None, words: tuple[str, ...]) -> None:
    """Print NAME: MESSAGE[: ERRNO TEXT] and exit 0."""
    reporter = _reporter(name)
    if errno_value is None:
        reporter.warnx("{}", _message(words))
    else:
        reporter.warn("{}", _message(words), error=errno_value)


@main.command()
@click.argument("status", type=int)
@_name_option
@_errno_option
@click.argument("words", metavar="[MESSAGE ...]", nargs=-1)
def err(status: int, name: str | None, errno_value: int | None, words: tuple[str, ...]) -> None:
    """Print NAME: MESSAGE[: ERRNO TEXT] and exit with STATUS."""
    reporter = _reporter(name)
    if errno_value is None:
        reporter.errx(status, "{}", _message(words))
    else:
        reporter.err(status, "{}", _message(words), error=errno_value)


@main.command()
@click.argument("errno_value", metavar="ERRNO", type=_ERRNO_RANGE)
def strerror(errno_value: int) -> None:
    """Print the system description of ERRNO to standard output."""
    click.echo(os.strerror(errno_value))


if __name__ == "__main__":
    main()
