"""Unit tests for the in-memory location and voyage repositories."""

from __future__ import annotations

import pytest

from tallyman.cargo import HandlingEventConstructionError
from tallyman.location import (
    InMemoryLocationRepository,
    Location,
    LocationRepository,
    UnknownLocationError,
)
from tallyman.voyage import (
    InMemoryVoyageRepository,
    UnknownVoyageError,
    Voyage,
    VoyageRepository,
)


class TestInMemoryLocationRepository:
    """Tests for InMemoryLocationRepository."""

    def test_seeded_location_is_found(self) -> None:
        """Locations passed to the constructor can be found."""
        hamburg = Location(un_locode="DEHAM", name="Hamburg")
        repository = InMemoryLocationRepository([hamburg])

        assert isinstance(repository, LocationRepository)
        assert repository.find("DEHAM") == hamburg

    def test_store_replaces_existing_location(self) -> None:
        """Storing under an existing code replaces the previous record."""
        repository = InMemoryLocationRepository(
            [Location(un_locode="DEHAM", name="Hamburg")]
        )
        renamed = Location(un_locode="DEHAM", name="Hamburg Port")

        repository.store(renamed)

        assert repository.find("DEHAM") == renamed

    def test_unknown_location_is_a_construction_error(self) -> None:
        """Unknown codes raise an error in the construction family."""
        with pytest.raises(UnknownLocationError) as excinfo:
            InMemoryLocationRepository().find("NLRTM")

        assert isinstance(excinfo.value, HandlingEventConstructionError)
        assert str(excinfo.value) == "Unknown location: NLRTM"


class TestInMemoryVoyageRepository:
    """Tests for InMemoryVoyageRepository."""

    def test_stored_voyage_is_found(self) -> None:
        """A stored voyage can be found by number."""
        repository = InMemoryVoyageRepository()
        repository.store(Voyage(number="0100S"))

        assert isinstance(repository, VoyageRepository)
        assert repository.find("0100S") == Voyage(number="0100S")

    def test_unknown_voyage_is_a_construction_error(self) -> None:
        """Unknown numbers raise an error in the construction family."""
        with pytest.raises(UnknownVoyageError) as excinfo:
            InMemoryVoyageRepository().find("V404")

        assert isinstance(excinfo.value, HandlingEventConstructionError)
        assert excinfo.value.voyage_number == "V404"
