import io

import pytest

from fswatcher import log


@pytest.fixture(autouse=True)
def _restore_verbose():
    previous = log.is_verbose()
    log.set_verbose(False)
    yield
    log.set_verbose(previous)


def test_verbose_toggle():
    assert log.is_verbose() is False
    log.set_verbose(True)
    assert log.is_verbose() is True
    log.set_verbose(False)
    assert log.is_verbose() is False


def test_string_from_format_substitutes():
    assert log.string_from_format("Cannot stat %s", "/tmp/x") == "Cannot stat /tmp/x"


def test_string_from_format_without_args():
    assert log.string_from_format("Done scanning.\n") == "Done scanning.\n"


def test_string_from_format_error_gives_empty():
    assert log.string_from_format("%s %s", "only-one") == ""


def test_log_silent_when_not_verbose(capsys):
    log.log("hello")
    log.logf("%s", "x")
    log.log_perror("bad")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_log_writes_when_verbose(capsys):
    log.set_verbose(True)
    log.log("hello")
    log.logf("Event %d for %s", 3, "/p")
    assert capsys.readouterr().out == "helloEvent 3 for /p"


def test_flog_and_flogf_write_to_stream():
    stream = io.StringIO()
    log.flog(stream, "a")
    assert stream.getvalue() == ""
    log.set_verbose(True)
    log.flog(stream, "a")
    log.flogf(stream, "-%s-", "b")
    assert stream.getvalue() == "a-b-"


def test_log_perror_reports_handled_os_error(capsys):
    log.set_verbose(True)
    try:
        raise FileNotFoundError(2, "No such file or directory")
    except OSError:
        log.logf_perror("Cannot stat %s", "/missing")
    assert capsys.readouterr().err == "Cannot stat /missing: No such file or directory\n"


def test_log_perror_without_error(capsys):
    log.set_verbose(True)
    log.log_perror("message")
    assert capsys.readouterr().err == "message\n"