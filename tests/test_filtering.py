import pytest

from fswatchlib.event import Event, EventFlag
from fswatchlib.exceptions import ErrorCode, FswError
from fswatchlib.filtering import (
    EventTypeFilter,
    EventTypeFilterSet,
    PathFilterSet,
    bubble_events,
)
from fswatchlib.filters import FilterType, MonitorFilter


def _set(*filters):
    result = PathFilterSet()
    for flt in filters:
        result.add(flt)
    return result


def test_empty_path_filter_set_accepts_everything():
    assert PathFilterSet().accept("/any/path") is True


def test_exclusion_filter_rejects_matching_path():
    filters = _set(MonitorFilter(r"\.log$", FilterType.EXCLUDE))
    assert filters.accept("/var/app.log") is False
    assert filters.accept("/var/app.txt") is True


def test_inclusion_overrides_earlier_exclusion():
    filters = _set(
        MonitorFilter(".*", FilterType.EXCLUDE),
        MonitorFilter(r"\.py$", FilterType.INCLUDE),
    )
    assert filters.accept("/src/a.py") is True
    assert filters.accept("/src/a.c") is False


def test_first_matching_inclusion_wins_over_later_exclusion():
    filters = _set(
        MonitorFilter("keep", FilterType.INCLUDE),
        MonitorFilter(".*", FilterType.EXCLUDE),
    )
    assert filters.accept("/keep/me") is True
    assert filters.accept("/drop/me") is False


def test_basic_regex_treats_plus_literally():
    filters = _set(MonitorFilter("a+b", FilterType.EXCLUDE))
    assert filters.accept("xa+by") is False
    assert filters.accept("aaab") is True


def test_extended_regex_plus_repeats():
    filters = _set(MonitorFilter("^a+b$", FilterType.EXCLUDE, extended=True))
    assert filters.accept("aaab") is False
    assert filters.accept("a+b") is True


def test_basic_regex_groups_and_intervals():
    filters = _set(MonitorFilter(r"^\(ab\)\{2\}$", FilterType.EXCLUDE))
    assert filters.accept("abab") is False
    assert filters.accept("ab") is True


def test_basic_regex_parentheses_are_literal():
    filters = _set(MonitorFilter("(x)", FilterType.EXCLUDE))
    assert filters.accept("f(x)") is False
    assert filters.accept("fx") is True


def test_case_insensitive_filter():
    filters = _set(MonitorFilter("readme", FilterType.EXCLUDE, case_sensitive=False))
    assert filters.accept("/docs/README") is False


def test_case_sensitive_filter():
    filters = _set(MonitorFilter("readme", FilterType.EXCLUDE))
    assert filters.accept("/docs/README") is True


def test_posix_character_class():
    filters = _set(MonitorFilter("^[[:digit:]]*$", FilterType.EXCLUDE))
    assert filters.accept("12345") is False
    assert filters.accept("12a45") is True


@pytest.mark.parametrize(
    "flt",
    [
        MonitorFilter("(", FilterType.EXCLUDE, extended=True),
        MonitorFilter(r"\(", FilterType.EXCLUDE),
        MonitorFilter("[abc", FilterType.EXCLUDE),
    ],
)
def test_invalid_regex_raises(flt):
    with pytest.raises(FswError) as info:
        PathFilterSet().add(flt)
    assert info.value.code == ErrorCode.INVALID_REGEX
    assert flt.text in str(info.value)


def test_path_filter_set_length_tracks_additions():
    filters = _set(MonitorFilter("a"), MonitorFilter("b"))
    assert len(filters) == 2


def test_empty_event_type_filters_accept_all():
    filters = EventTypeFilterSet()
    assert all(filters.accept(flag) for flag in EventFlag)


def test_event_type_filter_accepts_only_listed():
    filters = EventTypeFilterSet()
    filters.add(EventTypeFilter(EventFlag.CREATED))
    assert filters.accept(EventFlag.CREATED) is True
    assert filters.accept(EventFlag.REMOVED) is False


def test_filter_flags_keeps_accepted_in_order():
    filters = EventTypeFilterSet()
    filters.add(EventTypeFilter(EventFlag.UPDATED))
    filters.add(EventTypeFilter(EventFlag.CREATED))
    event = Event("/p", 1, (EventFlag.CREATED, EventFlag.REMOVED, EventFlag.UPDATED))
    assert filters.filter_flags(event) == [EventFlag.CREATED, EventFlag.UPDATED]


def test_filter_flags_without_filters_returns_all():
    event = Event("/p", 1, (EventFlag.REMOVED, EventFlag.CREATED))
    assert EventTypeFilterSet().filter_flags(event) == list(event.flags)


def test_replace_discards_previous_filters():
    filters = EventTypeFilterSet()
    filters.add(EventTypeFilter(EventFlag.CREATED))
    filters.replace([EventTypeFilter(EventFlag.REMOVED)])
    assert filters.accept(EventFlag.CREATED) is False
    assert filters.accept(EventFlag.REMOVED) is True
    assert len(filters) == 1


def test_bubble_events_merges_same_time_and_path():
    events = [
        Event("/a", 5, (EventFlag.UPDATED,)),
        Event("/a", 5, (EventFlag.CREATED, EventFlag.UPDATED)),
    ]
    result = bubble_events(events)
    assert result == [Event("/a", 5, (EventFlag.CREATED, EventFlag.UPDATED))]


def test_bubble_events_orders_by_time_then_path():
    events = [
        Event("/b", 2, (EventFlag.CREATED,)),
        Event("/a", 2, (EventFlag.CREATED,)),
        Event("/c", 1, (EventFlag.CREATED,)),
    ]
    result = bubble_events(events)
    assert [(e.time, e.path) for e in result] == [(1, "/c"), (2, "/a"), (2, "/b")]


def test_bubble_events_drops_correlation_id():
    result = bubble_events([Event("/a", 1, (EventFlag.CREATED,), 42)])
    assert result[0].correlation_id == 0


def test_bubble_events_empty():
    assert bubble_events([]) == []