"""
Endpoint resolver: finds the start and end airport of the itinerary.

Assuming the legs form a single Eulerian trail:
  - the start is the only airport with out_degree - in_degree == 1
  - the end is the only airport with out_degree - in_degree == -1
  - every other airport is balanced (diff == 0)

Connectivity is not checked on its own: disconnected inputs show up as
extra start/end candidates or as a missing one.
"""
import logging
from dataclasses import dataclass

import networkx as nx

from flight_itinerary.services.errors import (
    InvalidFlightPathError,
    ItineraryError,
    NoEndingAirportError,
    NoStartingAirportError,
)
from flight_itinerary.services.flight_graph import node_degrees

logger = logging.getLogger(__name__)

_MULTIPLE_STARTS = (
    "Failed to calculate the starting airport, more than 1 potential starting "
    "airport found, possibly because the flight paths don't form a single "
    "connected path."
)
_MULTIPLE_ENDS = (
    "Failed to calculate the ending airport, more than 1 potential ending "
    "airport found, possibly because the flight paths don't form a single "
    "connected path."
)
_UNBALANCED_AIRPORT = (
    "Failed to calculate the starting/ending airport, some non starting/ending "
    "airport has invalid paths from them."
)


@dataclass(frozen=True)
class ItineraryEndpoints:
    origin: str
    destination: str


def _fail(error: ItineraryError, detail: str | None = None) -> ItineraryError:
    if detail:
        logger.error("%s (%s)", error.message, detail)
    else:
        logger.error(error.message)
    return error


def resolve_endpoints(graph: nx.MultiDiGraph) -> ItineraryEndpoints:
    """
    Classify every airport by its degree diff and return the unique endpoints.

    The whole graph is scanned, then failures are reported in this order:
      1. more than one start candidate      → NoStartingAirportError
      2. more than one end candidate        → NoEndingAirportError
      3. an airport with |diff| >= 2        → InvalidFlightPathError
      4. no start candidate                 → NoStartingAirportError
      5. no end candidate                   → NoEndingAirportError
    """
    origins: list[str] = []
    destinations: list[str] = []
    unbalanced: list[str] = []

    for degree in node_degrees(graph):
        if degree.diff == 1:
            origins.append(degree.airport)
        elif degree.diff == -1:
            destinations.append(degree.airport)
        elif degree.diff != 0:
            unbalanced.append(degree.airport)

    if len(origins) > 1:
        raise _fail(NoStartingAirportError(_MULTIPLE_STARTS), f"candidates: {', '.join(origins)}")
    if len(destinations) > 1:
        raise _fail(NoEndingAirportError(_MULTIPLE_ENDS), f"candidates: {', '.join(destinations)}")
    if unbalanced:
        raise _fail(InvalidFlightPathError(_UNBALANCED_AIRPORT), f"airports: {', '.join(unbalanced)}")
    if not origins:
        raise _fail(NoStartingAirportError())
    if not destinations:
        raise _fail(NoEndingAirportError())

    return ItineraryEndpoints(origin=origins[0], destination=destinations[0])
