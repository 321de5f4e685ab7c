import pytest

from fswatcher.errors import ErrorCode, FswatchError
from fswatcher.events import (
    ALL_EVENT_FLAGS,
    Event,
    EventFlag,
    get_event_flag_by_name,
    get_event_flag_name,
)


def test_all_event_flags_has_sixteen_distinct_names():
    names = [get_event_flag_name(flag) for flag in ALL_EVENT_FLAGS]
    assert len(names) == 16
    assert len(set(names)) == 16


def test_flag_values_follow_header():
    assert int(get_event_flag_by_name("NoOp")) == 0
    assert int(get_event_flag_by_name("PlatformSpecific")) == 1
    assert int(get_event_flag_by_name("CloseWrite")) == 1 << 14


def test_nonzero_flags_are_powers_of_two():
    for flag in ALL_EVENT_FLAGS[1:]:
        value = int(get_event_flag_by_name(get_event_flag_name(flag)))
        assert value > 0
        assert value & (value - 1) == 0


@pytest.mark.parametrize("flag", ALL_EVENT_FLAGS)
def test_name_round_trip(flag):
    assert get_event_flag_by_name(get_event_flag_name(flag)) is flag


def test_lookup_by_name():
    assert get_event_flag_by_name("Created") is EventFlag.Created
    assert get_event_flag_by_name("AttributeModified") is EventFlag.AttributeModified


def test_name_of_plain_int():
    assert get_event_flag_name(1 << 3) == "Removed"


def test_unknown_name_raises():
    with pytest.raises(FswatchError) as info:
        get_event_flag_by_name("NoSuchFlag")
    assert info.value.code is ErrorCode.UNKNOWN_VALUE


def test_unknown_flag_value_raises():
    with pytest.raises(FswatchError) as info:
        get_event_flag_name(EventFlag.Created | EventFlag.Updated)
    assert info.value.code is ErrorCode.UNKNOWN_VALUE


def test_event_holds_its_data():
    evt = Event("/tmp/a", 10, [EventFlag.Created, int(EventFlag.IsFile)])
    assert evt.path == "/tmp/a"
    assert evt.time == 10
    assert evt.flags == (EventFlag.Created, EventFlag.IsFile)
    assert all(isinstance(f, EventFlag) for f in evt.flags)


def test_events_compare_by_value():
    a = Event("/x", 5, (EventFlag.Removed,))
    b = Event("/x", 5, [EventFlag.Removed])
    assert a == b


def test_event_is_immutable():
    evt = Event("/x", 1, ())
    with pytest.raises(AttributeError):
        evt.path = "/y"
    assert evt.path == "/x"