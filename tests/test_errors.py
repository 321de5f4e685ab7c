import pytest

from fswatcher.errors import ErrorCode, FswatchError


@pytest.mark.parametrize(
    "code, value",
    [
        (ErrorCode.OK, 0),
        (ErrorCode.UNKNOWN_ERROR, 1),
        (ErrorCode.SESSION_UNKNOWN, 1 << 1),
        (ErrorCode.MONITOR_ALREADY_EXISTS, 1 << 2),
        (ErrorCode.MEMORY, 1 << 3),
        (ErrorCode.UNKNOWN_MONITOR_TYPE, 1 << 4),
        (ErrorCode.CALLBACK_NOT_SET, 1 << 5),
        (ErrorCode.PATHS_NOT_SET, 1 << 6),
        (ErrorCode.MISSING_CONTEXT, 1 << 7),
        (ErrorCode.INVALID_PATH, 1 << 8),
        (ErrorCode.INVALID_CALLBACK, 1 << 9),
        (ErrorCode.INVALID_LATENCY, 1 << 10),
        (ErrorCode.INVALID_REGEX, 1 << 11),
        (ErrorCode.MONITOR_ALREADY_RUNNING, 1 << 12),
        (ErrorCode.UNKNOWN_VALUE, 1 << 13),
        (ErrorCode.INVALID_PROPERTY, 1 << 14),
    ],
)
def test_error_code_values(code, value):
    assert int(code) == value


def test_error_codes_are_distinct():
    errors = [FswatchError("x", int(c)) for c in ErrorCode]
    assert [e.code for e in errors] == list(ErrorCode)
    values = [int(e) for e in errors]
    assert len(values) == len(set(values))


def test_exception_carries_message_and_code():
    err = FswatchError("Unsupported monitor.", ErrorCode.UNKNOWN_MONITOR_TYPE)
    assert err.message == "Unsupported monitor."
    assert str(err) == "Unsupported monitor."
    assert err.code is ErrorCode.UNKNOWN_MONITOR_TYPE
    assert int(err) == int(ErrorCode.UNKNOWN_MONITOR_TYPE)


def test_exception_accepts_plain_int_code():
    err = FswatchError("bad", int(ErrorCode.INVALID_LATENCY))
    assert err.code is ErrorCode.INVALID_LATENCY


def test_exception_default_code():
    err = FswatchError("oops")
    assert err.code is ErrorCode.UNKNOWN_ERROR


def test_exception_rejects_unknown_code():
    with pytest.raises(ValueError):
        FswatchError("bad", 3)


def test_exception_can_be_raised_and_caught():
    err = FswatchError("Invalid value", ErrorCode.INVALID_PROPERTY)
    with pytest.raises(FswatchError) as info:
        raise err
    assert info.value is err
    assert info.value.code is ErrorCode.INVALID_PROPERTY
    assert info.value.message == "Invalid value"