"""
Errors raised while resolving an itinerary from a set of flight paths.

Every error is a client-input error: the API layer maps them all to a
400 response carrying ``kind`` and ``message``.
"""


class ItineraryError(Exception):
    """Base exception for all itinerary resolution errors."""

    kind: str = "ItineraryError"
    default_message: str = "Failed to calculate the flight itinerary."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyFlightPathsError(ItineraryError):
    """Raised when no flight paths were submitted."""

    kind = "EmptyFlightPaths"
    default_message = "Flight paths given is empty, please provide one with valid values."


class InvalidFlightPathError(ItineraryError):
    """Raised on a self-loop path or on a node that cannot sit on a single trail."""

    kind = "InvalidFlightPath"
    default_message = (
        "Some of the flight paths given has the same origin and destination "
        "airports, which is not valid."
    )


class NoStartingAirportError(ItineraryError):
    """Raised when zero or several candidate starting airports are found."""

    kind = "NoStartingAirportDiscovered"
    default_message = (
        "Failed to calculate the starting airport, possibly due to the starting "
        "and ending airport being the same, or the flight paths don't form a "
        "single connected path."
    )


class NoEndingAirportError(ItineraryError):
    """Raised when zero or several candidate ending airports are found."""

    kind = "NoEndingAirportDiscovered"
    default_message = (
        "Failed to calculate the ending airport, possibly due to the starting "
        "and ending airport being the same, or the flight paths don't form a "
        "single connected path."
    )
