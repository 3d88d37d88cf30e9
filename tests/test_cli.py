# test_cli.py
#
# Tests:
# - warn: prints NAME: MESSAGE and exits 0
# - warn: -e appends the errno description
# - warn: default prefix is the command name
# - err: exits with STATUS, including 0
# - err: -e appends the errno description
# - Braces in the message are printed verbatim
# - strerror prints the description on stdout
# - Errno values outside the C int range are usage errors
# - --version prints the package version

import errno
import os

from click.testing import CliRunner

import cerm
from cerm.cli import main


def _invoke(*args):
    return CliRunner().invoke(main, list(args), prog_name="cerm")


class TestWarnCommand:
    def test_plain(self):
        result = _invoke("warn", "-n", "backup", "skipping", "/tmp/x")
        assert result.exit_code == 0
        assert result.output == "backup: skipping /tmp/x\n"

    def test_errno(self):
        result = _invoke("warn", "-n", "backup", "-e", str(errno.ENOENT), "open", "x")
        assert result.exit_code == 0
        assert result.output == f"backup: open x: {os.strerror(errno.ENOENT)}\n"

    def test_default_name(self):
        result = _invoke("warn", "hello")
        assert result.output == "cerm: hello\n"

    def test_braces_verbatim(self):
        result = _invoke("warn", "-n", "sh", "{0}", "{missing}")
        assert result.output == "sh: {0} {missing}\n"


class TestErrCommand:
    def test_status(self):
        result = _invoke("err", "7", "-n", "backup", "disk", "full")
        assert result.exit_code == 7
        assert result.output == "backup: disk full\n"

    def test_zero_status(self):
        result = _invoke("err", "0", "-n", "backup", "done")
        assert result.exit_code == 0
        assert result.output == "backup: done\n"

    def test_errno_only(self):
        result = _invoke("err", "2", "-n", "backup", "-e", str(errno.ENOSPC))
        assert result.exit_code == 2
        assert result.output == f"backup: {os.strerror(errno.ENOSPC)}\n"


def test_strerror():
    result = _invoke("strerror", str(errno.EACCES))
    assert result.exit_code == 0
    assert result.output == os.strerror(errno.EACCES) + "\n"


def test_strerror_out_of_range():
    result = _invoke("strerror", str(2**40))
    assert result.exit_code == 2
    assert not isinstance(result.exception, OverflowError)


def test_warn_errno_out_of_range():
    result = _invoke("warn", "-n", "backup", "-e", str(2**40), "x")
    assert result.exit_code == 2


def test_version():
    result = _invoke("--version")
    assert result.exit_code == 0
    assert cerm.__version__ in result.output
