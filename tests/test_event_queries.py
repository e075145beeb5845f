"""Event feeds, search and counts."""

from datetime import date, time

import pytest

from exceptions import ValidationError
from models import EventStatus
from repositories import EventStore
from factories import make_event


@pytest.fixture
def catalog(event_service):
    """Five events across all three statuses, created out of date order."""
    late = event_service.create(make_event(title="Late Talk", day=date(2024, 5, 3), at=time(20, 0), location="Hall A"))
    morning = event_service.create(make_event(title="Morning Run", day=date(2024, 5, 1), at=time(7, 0), location="Track"))
    evening = event_service.create(make_event(title="Hack Night", day=date(2024, 5, 1), at=time(18, 0), location="Lab 3"))
    pending = event_service.create(make_event(title="Chess Club", day=date(2024, 4, 30), at=time(12, 0), location="Library"))
    rejected = event_service.create(make_event(title="Lab Party", day=date(2024, 4, 1), at=time(22, 0), location="Dorm"))

    for event in (late, morning, evening):
        event_service.approve(event.id)
    event_service.reject(rejected.id)

    return {
        "late": late.id,
        "morning": morning.id,
        "evening": evening.id,
        "pending": pending.id,
        "rejected": rejected.id,
    }


def ids(events):
    return [event.id for event in events]


def test_list_approved_is_sorted_by_date_then_time(query_service, catalog):
    approved = query_service.list_approved()

    assert ids(approved) == [catalog["morning"], catalog["evening"], catalog["late"]]
    assert all(event.status == EventStatus.APPROVED for event in approved)
    for a, b in zip(approved, approved[1:]):
        assert (a.date, a.time) <= (b.date, b.time)


def test_list_recent_excludes_rejected_and_is_sorted(query_service, catalog):
    recent = query_service.list_recent()

    assert ids(recent) == [catalog["pending"], catalog["morning"], catalog["evening"], catalog["late"]]
    assert EventStatus.REJECTED not in {event.status for event in recent}


def test_all_minus_recent_is_the_rejected_subset(query_service, catalog):
    everything = set(ids(query_service.list_all()))
    recent = set(ids(query_service.list_recent()))

    assert everything - recent == {catalog["rejected"]}


def test_search_matches_title_or_location_case_insensitively(query_service, catalog):
    assert ids(query_service.search("hack")) == [catalog["evening"]]
    assert set(ids(query_service.search("LIBRARY"))) == {catalog["pending"]}


def test_search_skips_rejected_events(query_service, catalog):
    # "lab" matches the rejected "Lab Party" and the approved event held in "Lab 3"
    assert ids(query_service.search("lab")) == [catalog["evening"]]


def test_empty_search_matches_recent_feed(query_service, catalog):
    assert set(ids(query_service.search(""))) == set(ids(query_service.list_recent()))


def test_search_treats_wildcards_literally(query_service, catalog):
    assert query_service.search("%") == []
    assert query_service.search("_") == []


def test_counts_sum_to_total(query_service, catalog):
    counts = query_service.counts()

    assert counts == {"approved": 3, "pending": 1, "rejected": 1, "total": 5}
    assert counts["approved"] + counts["pending"] + counts["rejected"] == counts["total"]


def test_count_by_status_accepts_plain_strings(query_service, catalog):
    assert query_service.count_by_status("APPROVED") == 3
    assert query_service.count_by_status(EventStatus.REJECTED) == 1


def test_queries_reflect_changes_immediately(event_service, query_service, catalog):
    event_service.reject(catalog["morning"])

    assert catalog["morning"] not in ids(query_service.list_approved())
    assert query_service.count_by_status(EventStatus.APPROVED) == 2
    assert query_service.total() == 5


def test_example_submission_shows_up_once_approved(event_service, query_service):
    event = event_service.create(make_event())
    assert event.status == EventStatus.PENDING

    event_service.approve(event.id)

    assert event.id in ids(query_service.list_approved())
    assert query_service.count_by_status(EventStatus.APPROVED) == 1


def test_store_find_by_status_and_missing_delete(db, catalog):
    store = EventStore(db)

    assert {event.id for event in store.find_by_status(EventStatus.PENDING)} == {catalog["pending"]}
    store.delete_by_id(12345)
    assert store.count_all() == 5


def test_search_folds_non_ascii_case(event_service, query_service):
    event = event_service.create(make_event(title="ÉCOLE Night", location="Ägypten"))

    assert ids(query_service.search("école")) == [event.id]
    assert ids(query_service.search("ägypten")) == [event.id]
    assert ids(query_service.search("ÄGYP")) == [event.id]


def test_count_by_unknown_status_raises_validation_error(query_service):
    with pytest.raises(ValidationError) as exc_info:
        query_service.count_by_status("FOO")

    assert exc_info.value.status_code == 422
