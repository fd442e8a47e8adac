from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# JSON bodies use camelCase keys; snake_case is accepted on input too
# ---------------------------------------------------------------------------

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Itinerary computation
# ---------------------------------------------------------------------------

class FlightItineraryIn(_CamelModel):
    # each leg is exactly [origin, destination]
    flight_paths: list[tuple[str, str]]


class FlightItineraryOut(_CamelModel):
    itinerary: list[str]    # [starting airport, ending airport]


# ---------------------------------------------------------------------------
# Error payload: returned for every 4xx/5xx produced by the service
# ---------------------------------------------------------------------------

class ErrorOut(_CamelModel):
    error_kind: str         # "EmptyFlightPaths" | "InvalidFlightPath" | ... | "InternalError"
    error_message: str


class HealthOut(BaseModel):
    status: str
    service: str
