"""Composition of diagnostic strings.

A diagnostic reads ``<prefix>: <body>[: <errno description>]``. Separators are
only placed in front of a non-empty segment, so an errno-only diagnostic comes
out as ``<prefix>: <errno description>`` and an entirely empty one as ``""``.
"""

import os
import sys

from .errors import FormatError
from .progname import program_name

_SEPARATOR = ": "


def format_body(template: str, *args, **kwargs) -> str:
    """Substitute ``args``/``kwargs`` into ``template`` with :meth:`str.format`.

    Without arguments the template is returned verbatim, so literal braces in
    a fixed message need no escaping.

    Raises
    ------
    FormatError
        If the template and the arguments do not match.
    """
    if not args and not kwargs:
        return template
    try:
        return template.format(*args, **kwargs)
    except (IndexError, KeyError, ValueError) as e:
        raise FormatError(f"cannot format {template!r}: {e}") from e


def errno_description(error: BaseException | int | None = None) -> str:
    """Describe the last operating-system error.

    Parameters
    ----------
    error:
        An ``OSError``, a raw errno value, or any other exception. ``None``
        means the exception currently being handled, if there is one.
    """
    if error is None:
        error = sys.exc_info()[1]
    if error is None:
        return os.strerror(0)
    if isinstance(error, bool):
        raise TypeError("error must be an exception or an errno value, not bool")
    if isinstance(error, int):
        try:
            return os.strerror(error)
        except (OverflowError, ValueError):
            return f"Unknown error {error}"
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or type(error).__name__


def compose(prefix: str, body: str, errno_text: str | None = None) -> str:
    """Join prefix, body and optional errno text into one diagnostic line."""
    parts = [prefix]
    if body:
        parts.append(body)
    if errno_text is not None:
        parts.append(errno_text)
    return _SEPARATOR.join(parts)


def format_plain(template: str, *args, prefix: str | None = None, **kwargs) -> str:
    """Build ``<prefix>: <body>`` without any system error text."""
    body = format_body(template, *args, **kwargs)
    return compose(program_name() if prefix is None else prefix, body)


def format_with_errno(
    template: str,
    *args,
    error: BaseException | int | None = None,
    prefix: str | None = None,
    **kwargs,
) -> str:
    """Build ``<prefix>: <body>: <errno description>``.

    The error description is captured before the body is formatted, since
    formatting may run arbitrary ``__format__`` code that clobbers it.
    """
    errno_text = errno_description(error)
    body = format_body(template, *args, **kwargs)
    return compose(program_name() if prefix is None else prefix, body, errno_text)
