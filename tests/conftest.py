import pytest

from cerm.progname import reset_program_name


@pytest.fixture(autouse=True)
def _fresh_program_name():
    reset_program_name()
    yield
    reset_program_name()
