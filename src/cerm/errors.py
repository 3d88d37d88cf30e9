"""Exception types raised by cerm."""


class CermError(Exception):
    """Base class for errors raised while composing a diagnostic."""


class FormatError(CermError, ValueError):
    """The template and its arguments do not fit together."""
