from datetime import date

from tixhub.core.consolidate_events import consolidate_events
from tixhub.core.models import Event


def _event(id: str, city: str, name: str = "Show") -> Event:
    return Event(
        id=id,
        name=name,
        start_date=date(2026, 11, 1),
        venue_name="Arena",
        venue_city=city,
    )


def test_duplicate_ids_across_cities_keep_one_record():
    toronto = [_event("a", "Toronto"), _event("shared", "Toronto")]
    vancouver = [_event("shared", "Vancouver"), _event("b", "Vancouver")]

    merged = consolidate_events(toronto, vancouver)

    assert [e.id for e in merged] == ["a", "shared", "b"]
    assert sum(1 for e in merged if e.id == "shared") == 1


def test_last_seen_duplicate_wins_deterministically():
    first = _event("x", "Toronto", name="Old")
    last = _event("x", "Montreal", name="New")

    assert consolidate_events([first], [last]) == [last]
    assert consolidate_events([first], [last]) == consolidate_events([first], [last])


def test_empty_batches():
    assert consolidate_events() == []
    assert consolidate_events([], None) == []
