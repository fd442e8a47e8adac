"""
Itinerary Engine: from unordered flight paths to [start, end].

Runs the whole resolution in 4 steps:
  Step 1: validate_flight_paths() → empty input / self-loop legs
  Step 2: build_flight_graph()    → directed multigraph keyed by airport code
  Step 3: resolve_endpoints()     → unique start (diff +1) and end (diff -1)
  Step 4: project_itinerary()     → FlightItineraryOut

Every step either proceeds or raises an ItineraryError; nothing is retried
and nothing is cached between calls.
"""
import logging
from collections.abc import Iterable, Sequence

from flight_itinerary.models.schemas import FlightItineraryOut
from flight_itinerary.services.endpoint_resolver import ItineraryEndpoints, resolve_endpoints
from flight_itinerary.services.flight_graph import FlightPath, build_flight_graph
from flight_itinerary.services.validation import validate_flight_paths

logger = logging.getLogger(__name__)


def _to_flight_paths(flight_paths: Iterable[FlightPath | Sequence[str]]) -> list[FlightPath]:
    return [
        p if isinstance(p, FlightPath) else FlightPath.from_pair(p)
        for p in flight_paths
    ]


def project_itinerary(endpoints: ItineraryEndpoints) -> FlightItineraryOut:
    """Shape the resolved endpoints as the response payload."""
    return FlightItineraryOut(itinerary=[endpoints.origin, endpoints.destination])


def compute_itinerary(flight_paths: Iterable[FlightPath | Sequence[str]]) -> FlightItineraryOut:
    """
    Resolve the starting and ending airport of the submitted legs.

    Accepts FlightPath values or raw [origin, destination] pairs.

    Raises:
        EmptyFlightPathsError, InvalidFlightPathError,
        NoStartingAirportError, NoEndingAirportError
    """
    paths = _to_flight_paths(flight_paths)
    logger.info(
        "Received request to calculate flight itinerary: %s",
        [[p.origin, p.destination] for p in paths],
    )

    validate_flight_paths(paths)
    graph = build_flight_graph(paths)
    endpoints = resolve_endpoints(graph)

    logger.info(
        "Successfully discovered starting airport: %s and ending airport: %s",
        endpoints.origin, endpoints.destination,
    )
    return project_itinerary(endpoints)
