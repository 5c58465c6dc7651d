import pytest

from transit_catalogue.domain import Bus, Stop
from transit_catalogue.geo import Coordinates
from transit_catalogue.transport_catalogue import TransportCatalogue


def test_add_and_find_stop():
    catalogue = TransportCatalogue()
    catalogue.add_stop(Stop("A", Coordinates(55.6, 37.2)))
    stop = catalogue.find_stop("A")
    assert stop.position == Coordinates(55.6, 37.2)
    assert catalogue.find_stop("missing") is None


def test_adding_existing_stop_updates_position_only():
    catalogue = TransportCatalogue()
    catalogue.add_bus(Bus("7", ["A", "B"]))
    catalogue.add_stop(Stop("A", Coordinates(1.0, 2.0)))
    stop = catalogue.find_stop("A")
    assert stop.position == Coordinates(1.0, 2.0)
    assert stop.buses == {"7"}


def test_bus_creates_missing_stops():
    catalogue = TransportCatalogue()
    catalogue.add_bus(Bus("7", ["A", "B", "A"]))
    assert set(catalogue.stops()) == {"A", "B"}
    assert catalogue.find_stop("B").position == Coordinates(0.0, 0.0)
    assert catalogue.find_bus("7").stops == ["A", "B", "A"]
    assert catalogue.find_bus("8") is None


def test_stop_lists_all_buses():
    catalogue = TransportCatalogue()
    catalogue.add_bus(Bus("1", ["A", "B"]))
    catalogue.add_bus(Bus("2", ["B", "C"]))
    assert catalogue.find_stop("B").buses == {"1", "2"}
    assert set(catalogue.buses()) == {"1", "2"}


def test_distance_creates_destination_stop():
    catalogue = TransportCatalogue()
    catalogue.add_stop(Stop("A"))
    catalogue.add_distance("A", "B", 500)
    assert catalogue.find_stop("B") is not None
    assert catalogue.get_distance(catalogue.find_stop("A"), catalogue.find_stop("B")) == 500


def test_distance_falls_back_to_reverse_direction():
    catalogue = TransportCatalogue()
    catalogue.add_stop(Stop("A"))
    catalogue.add_stop(Stop("B"))
    catalogue.add_distance("A", "B", 500)
    a, b = catalogue.find_stop("A"), catalogue.find_stop("B")
    assert catalogue.get_distance(b, a) == 500
    catalogue.add_distance("B", "A", 700)
    assert catalogue.get_distance(b, a) == 700
    assert catalogue.get_distance(a, b) == 500


def test_distance_with_missing_stop_is_zero():
    catalogue = TransportCatalogue()
    catalogue.add_stop(Stop("A"))
    assert catalogue.get_distance(catalogue.find_stop("A"), None) == 0


def test_unknown_distance_raises():
    catalogue = TransportCatalogue()
    catalogue.add_stop(Stop("A"))
    catalogue.add_stop(Stop("B"))
    with pytest.raises(KeyError):
        catalogue.get_distance(catalogue.find_stop("A"), catalogue.find_stop("B"))


def test_views_are_read_only():
    catalogue = TransportCatalogue()
    with pytest.raises(TypeError):
        catalogue.stops()["X"] = Stop("X")