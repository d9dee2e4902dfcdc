import datetime as dt
from types import SimpleNamespace

from groupboard.services.posting import as_utc, feed_sort_key


def _post(name, created_day, date_day=None, is_event=None):
    return SimpleNamespace(
        name=name,
        is_event=bool(date_day) if is_event is None else is_event,
        creation_date=dt.datetime(2026, 1, created_day, tzinfo=dt.timezone.utc),
        date=dt.datetime(2026, 1, date_day, tzinfo=dt.timezone.utc) if date_day else None,
    )


def test_events_sort_by_event_date_and_notes_by_creation():
    posts = [
        _post("note-3", 3),
        _post("event-on-20", 1, date_day=20),
        _post("note-5", 5),
        _post("event-on-2", 6, date_day=2),
    ]
    ordered = sorted(posts, key=feed_sort_key, reverse=True)
    assert [p.name for p in ordered] == ["event-on-20", "note-5", "note-3", "event-on-2"]


def test_date_on_a_plain_post_is_ignored_for_ordering():
    note = _post("note-created-on-9", 9, date_day=1, is_event=False)
    event = _post("event-on-5", 2, date_day=5)
    ordered = sorted([event, note], key=feed_sort_key, reverse=True)
    assert [p.name for p in ordered] == ["note-created-on-9", "event-on-5"]


def test_same_effective_date_breaks_ties_by_creation():
    older = _post("older", 1, date_day=10)
    newer = _post("newer", 4, date_day=10)
    assert sorted([older, newer], key=feed_sort_key, reverse=True) == [newer, older]


def test_as_utc_assumes_utc_for_naive_values():
    naive = dt.datetime(2026, 5, 1, 12, 0)
    assert as_utc(naive) == dt.datetime(2026, 5, 1, 12, 0, tzinfo=dt.timezone.utc)
    aware = dt.datetime(2026, 5, 1, 12, 0, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    assert as_utc(aware) is aware
    assert as_utc(None) is None
