"""Diagnostics bound to an explicit program name and output stream."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import IO, NoReturn, TypeVar

from .compose import format_plain, format_with_errno
from .progname import program_name
from .sink import emit
from .terminate import exit_with

T = TypeVar("T")


@dataclass(frozen=True)
class Reporter:
    """err/warn family bound to a prefix and a stream.

    ``prog_name=None`` consults :func:`~cerm.progname.program_name` on every
    call; ``file=None`` writes to the standard error stream.
    """

    prog_name: str | None = None
    file: IO[str] | None = None

    @property
    def prefix(self) -> str:
        return program_name() if self.prog_name is None else self.prog_name

    # -- non-fatal ------------------------------------------------------------

    def warn(
        self,
        template: str,
        *args,
        error: BaseException | int | None = None,
        **kwargs,
    ) -> bool:
        """Emit ``prefix: message: errno description``."""
        message = format_with_errno(template, *args, error=error, prefix=self.prefix, **kwargs)
        return emit(message, self.file)

    def warnx(self, template: str, *args, **kwargs) -> bool:
        """Emit ``prefix: message``."""
        return emit(format_plain(template, *args, prefix=self.prefix, **kwargs), self.file)

    # -- fatal ----------------------------------------------------------------

    def err(
        self,
        status: int,
        template: str,
        *args,
        error: BaseException | int | None = None,
        **kwargs,
    ) -> NoReturn:
        """Like :meth:`warn`, then exit with ``status``."""
        message = format_with_errno(template, *args, error=error, prefix=self.prefix, **kwargs)
        exit_with(status, message, self.file)

    def errx(self, status: int, template: str, *args, **kwargs) -> NoReturn:
        """Like :meth:`warnx`, then exit with ``status``."""
        exit_with(status, format_plain(template, *args, prefix=self.prefix, **kwargs), self.file)

    # -- helpers --------------------------------------------------------------

    def require(self, value: T | None, status: int, template: str, *args, **kwargs) -> T:
        """Return ``value``, or :meth:`errx` with the given message if it is ``None``."""
        if value is None:
            self.errx(status, template, *args, **kwargs)
        return value

    @contextmanager
    def fatal_on(
        self,
        *exc_types: type[BaseException],
        status: int,
    ) -> Iterator[None]:
        """Turn the listed exceptions raised in the block into :meth:`errx`.

        With no types given, any :class:`Exception` is caught.
        ``SystemExit`` always passes through, so a fatal call made inside the
        block keeps its own message and status.
        """
        try:
            yield
        except SystemExit:
            raise
        except exc_types or (Exception,) as e:
            self.errx(status, "{}", e)
