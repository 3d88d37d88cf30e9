"""Writing diagnostics to the standard error stream."""

from typing import IO

import click


def emit(message: str, file: IO[str] | None = None) -> bool:
    """Write ``message`` and one newline to ``file`` (default: stderr).

    ``click.echo`` flushes after writing, so the line is visible even if the
    process exits straight afterwards. A failed write is not retried and not
    raised; it is reported by returning ``False``.

    ANSI escape sequences are stripped by ``click.echo`` when the stream is
    not a terminal, so such messages do not reach a pipe byte for byte.
    """
    try:
        if file is None:
            click.echo(message, err=True)
        else:
            click.echo(message, file=file)
    except (OSError, ValueError):
        return False
    return True
