"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import datetime as dt

import pytest

from tallyman.cargo import (
    Cargo,
    DefaultHandlingEventFactory,
    InMemoryCargoRepository,
)
from tallyman.handling import HandlingRegistrationService
from tallyman.location import InMemoryLocationRepository, Location
from tallyman.voyage import InMemoryVoyageRepository, Voyage
from tests.helpers.handling_doubles import (
    CallJournal,
    RecordingEventHandler,
    RecordingHandlingEventRepository,
    StubHandlingEventFactory,
)

REGISTERED_AT = dt.datetime(2024, 1, 2, 9, 30, tzinfo=dt.UTC)


@pytest.fixture
def journal() -> CallJournal:
    """Return an empty call journal shared by the collaborator doubles."""
    return CallJournal()


@pytest.fixture
def repository(journal: CallJournal) -> RecordingHandlingEventRepository:
    """Return a recording repository double."""
    return RecordingHandlingEventRepository(journal)


@pytest.fixture
def factory(journal: CallJournal) -> StubHandlingEventFactory:
    """Return a factory double that builds events from its arguments."""
    return StubHandlingEventFactory(journal)


@pytest.fixture
def event_handler(journal: CallJournal) -> RecordingEventHandler:
    """Return a recording event handler double."""
    return RecordingEventHandler(journal)


@pytest.fixture
def service(
    repository: RecordingHandlingEventRepository,
    factory: StubHandlingEventFactory,
    event_handler: RecordingEventHandler,
) -> HandlingRegistrationService:
    """Return a registration service wired to the doubles with a fixed clock."""
    return HandlingRegistrationService(
        repository,
        factory,
        event_handler,
        clock=lambda: REGISTERED_AT,
    )


@pytest.fixture
def cargos() -> InMemoryCargoRepository:
    """Return a cargo repository holding ABC123 (Hong Kong to New York)."""
    return InMemoryCargoRepository(
        [Cargo(tracking_id="ABC123", origin="CNHKG", destination="USNYC")]
    )


@pytest.fixture
def voyages() -> InMemoryVoyageRepository:
    """Return a voyage repository holding V001 and V002."""
    return InMemoryVoyageRepository([Voyage(number="V001"), Voyage(number="V002")])


@pytest.fixture
def locations() -> InMemoryLocationRepository:
    """Return a location repository holding Hong Kong and New York."""
    return InMemoryLocationRepository(
        [
            Location(un_locode="CNHKG", name="Hong Kong"),
            Location(un_locode="USNYC", name="New York"),
        ]
    )


@pytest.fixture
def default_factory(
    cargos: InMemoryCargoRepository,
    voyages: InMemoryVoyageRepository,
    locations: InMemoryLocationRepository,
) -> DefaultHandlingEventFactory:
    """Return the production factory over the seeded repositories."""
    return DefaultHandlingEventFactory(cargos, voyages, locations)
