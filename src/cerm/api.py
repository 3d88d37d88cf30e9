"""Module-level err/warn functions using the process-wide program name.

| function | errno text | exits |
|----------|------------|-------|
| warn     | yes        | no    |
| warnx    | no         | no    |
| err      | yes        | yes   |
| errx     | no         | yes   |
"""

from contextlib import AbstractContextManager
from typing import NoReturn, TypeVar

from .reporter import Reporter

T = TypeVar("T")

_default = Reporter()


def warn(template: str, *args, error: BaseException | int | None = None, **kwargs) -> bool:
    return _default.warn(template, *args, error=error, **kwargs)


def warnx(template: str, *args, **kwargs) -> bool:
    return _default.warnx(template, *args, **kwargs)


def err(
    status: int,
    template: str,
    *args,
    error: BaseException | int | None = None,
    **kwargs,
) -> NoReturn:
    _default.err(status, template, *args, error=error, **kwargs)


def errx(status: int, template: str, *args, **kwargs) -> NoReturn:
    _default.errx(status, template, *args, **kwargs)


def require(value: T | None, status: int, template: str, *args, **kwargs) -> T:
    return _default.require(value, status, template, *args, **kwargs)


def fatal_on(*exc_types: type[BaseException], status: int) -> AbstractContextManager[None]:
    return _default.fatal_on(*exc_types, status=status)
