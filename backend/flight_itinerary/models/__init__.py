from flight_itinerary.models.schemas import (  # noqa: F401
    ErrorOut,
    FlightItineraryIn,
    FlightItineraryOut,
    HealthOut,
)
