"""
Input validation for the itinerary pipeline.

Runs before the graph is built and reports the first disqualifying
condition only.
"""
import logging
from collections.abc import Sequence

from flight_itinerary.services.errors import EmptyFlightPathsError, InvalidFlightPathError
from flight_itinerary.services.flight_graph import FlightPath

logger = logging.getLogger(__name__)


def validate_flight_paths(flight_paths: Sequence[FlightPath]) -> None:
    """
    Check the submitted legs, in order.

    Raises:
        EmptyFlightPathsError: no legs at all (always checked first).
        InvalidFlightPathError: first leg whose origin equals its destination,
            compared case-insensitively.
    """
    if not flight_paths:
        error = EmptyFlightPathsError()
        logger.error(error.message)
        raise error

    for index, path in enumerate(flight_paths):
        if path.is_round_trip:
            error = InvalidFlightPathError()
            logger.error("%s (path #%d: %s -> %s)", error.message, index, path.origin, path.destination)
            raise error
