from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from leasereport.models.lease import LeaseRecord
from leasereport.storage.lease_store import LeaseStore


def test_commit_and_latest_wins():
    store = LeaseStore()
    store.commit(LeaseRecord(address="10.0.0.1", binding_state="free"))
    store.commit(LeaseRecord(address="10.0.0.2", binding_state="active"))
    store.commit(LeaseRecord(address="10.0.0.1", binding_state="active", hardware_identifier="aa:aa:aa:aa:aa:aa"))

    assert len(store) == 2
    assert "10.0.0.1" in store
    assert store.get("10.0.0.1").binding_state == "active"
    assert store.get("10.0.0.1").hardware_identifier == "aa:aa:aa:aa:aa:aa"
    assert store.get("10.0.0.3") is None


def test_all_is_read_only():
    store = LeaseStore()
    store.commit(LeaseRecord(address="10.0.0.1"))
    view = store.all()

    with pytest.raises(TypeError):
        view["10.0.0.2"] = LeaseRecord(address="10.0.0.2")

    store.commit(LeaseRecord(address="10.0.0.2"))
    assert set(view) == {"10.0.0.1", "10.0.0.2"}


def test_record_with_errors_is_refused():
    store = LeaseStore()
    with pytest.raises(ValueError):
        store.commit(LeaseRecord(address="10.0.0.1", parse_errors=["starts: bad"]))
    assert len(store) == 0


def test_stores_are_independent():
    first, second = LeaseStore(), LeaseStore()
    first.commit(LeaseRecord(address="10.0.0.1"))
    assert len(second) == 0


def test_record_is_frozen_and_needs_address():
    record = LeaseRecord(address="10.0.0.1")
    with pytest.raises(ValidationError):
        record.binding_state = "free"
    with pytest.raises(ValidationError):
        LeaseRecord(address="")


def test_is_active():
    now = datetime(2023, 1, 10, 12, 0, tzinfo=timezone.utc)
    assert LeaseRecord(address="a", ends_at=now + timedelta(hours=1)).is_active(now)
    assert not LeaseRecord(address="a", ends_at=now - timedelta(hours=1)).is_active(now)
    assert LeaseRecord(address="a").is_active(now)


def test_row():
    starts = datetime(2023, 1, 10, 8, 0, tzinfo=timezone.utc)
    record = LeaseRecord(address="10.0.0.5", hardware_identifier="aa:bb:cc:dd:ee:ff",
                         binding_state="active", starts_at=starts)
    assert record.row() == ("10.0.0.5", "aa:bb:cc:dd:ee:ff", "", "active", "2023-01-10 08:00:00+00:00", "")
