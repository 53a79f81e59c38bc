"""Unit tests for the in-memory cargo and handling event repositories."""

from __future__ import annotations

import datetime as dt
import threading

import pytest

from tallyman.cargo import (
    Cargo,
    CargoRepository,
    HandlingEvent,
    HandlingEventRepository,
    HandlingEventType,
    HandlingHistory,
    InMemoryCargoRepository,
    InMemoryHandlingEventRepository,
    UnknownCargoError,
)


def _event(
    tracking_id: str = "ABC123",
    *,
    day: int = 1,
    event_type: HandlingEventType = HandlingEventType.LOAD,
) -> HandlingEvent:
    return HandlingEvent(
        registration_time=dt.datetime(2024, 2, 1, tzinfo=dt.UTC),
        completion_time=dt.datetime(2024, 1, day, tzinfo=dt.UTC),
        tracking_id=tracking_id,
        voyage_number="V001",
        location="USNYC",
        event_type=event_type,
    )


class TestInMemoryHandlingEventRepository:
    """Tests for InMemoryHandlingEventRepository."""

    def test_satisfies_repository_protocol(self) -> None:
        """The in-memory store is a HandlingEventRepository."""
        assert isinstance(InMemoryHandlingEventRepository(), HandlingEventRepository)

    def test_unknown_tracking_id_has_empty_history(self) -> None:
        """Querying a cargo with no events yields an empty history."""
        history = InMemoryHandlingEventRepository().query_handling_history("NOPE")

        assert history == HandlingHistory(tracking_id="NOPE")
        assert history.most_recently_completed_event() is None

    def test_history_keeps_insertion_order_per_cargo(self) -> None:
        """Events are returned per tracking ID in the order they were stored."""
        repository = InMemoryHandlingEventRepository()
        first = _event(day=3)
        other = _event("XYZ789")
        second = _event(day=2, event_type=HandlingEventType.UNLOAD)

        for event in (first, other, second):
            repository.store(event)

        history = repository.query_handling_history("ABC123")
        assert history.events == (first, second), (
            "History should hold only ABC123 events in storage order"
        )
        assert len(history) == 2

    def test_history_is_a_snapshot(self) -> None:
        """Later stores do not change a previously returned history."""
        repository = InMemoryHandlingEventRepository()
        repository.store(_event())
        history = repository.query_handling_history("ABC123")

        repository.store(_event(day=2))

        assert len(history) == 1, "Returned history must not change afterwards"

    def test_concurrent_stores_are_all_kept(self) -> None:
        """Stores from several threads are all recorded."""
        repository = InMemoryHandlingEventRepository()

        def _store_many() -> None:
            for _ in range(50):
                repository.store(_event())

        threads = [threading.Thread(target=_store_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(repository.query_handling_history("ABC123")) == 200


class TestHandlingHistory:
    """Tests for HandlingHistory.most_recently_completed_event."""

    def test_picks_latest_completion_time(self) -> None:
        """The event that completed last is returned regardless of order."""
        latest = _event(day=5)
        history = HandlingHistory(
            tracking_id="ABC123", events=(_event(day=2), latest, _event(day=4))
        )

        assert history.most_recently_completed_event() is latest

    def test_ties_prefer_last_stored(self) -> None:
        """Among equal completion times the last stored event wins."""
        first = _event(day=2, event_type=HandlingEventType.UNLOAD)
        second = _event(day=2, event_type=HandlingEventType.CUSTOMS)
        history = HandlingHistory(tracking_id="ABC123", events=(first, second))

        assert history.most_recently_completed_event() is second


class TestInMemoryCargoRepository:
    """Tests for InMemoryCargoRepository."""

    def test_find_returns_stored_cargo(self) -> None:
        """A stored cargo can be found by tracking ID."""
        cargo = Cargo(tracking_id="ABC123", origin="CNHKG", destination="USNYC")
        repository = InMemoryCargoRepository()
        repository.store(cargo)

        assert isinstance(repository, CargoRepository)
        assert repository.find("ABC123") == cargo

    def test_find_unknown_raises(self) -> None:
        """An unknown tracking ID raises UnknownCargoError."""
        with pytest.raises(UnknownCargoError, match="Unknown cargo: ABC123"):
            InMemoryCargoRepository().find("ABC123")
