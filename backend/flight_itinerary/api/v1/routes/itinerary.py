"""
Endpoint Itinerary.

POST /api/v1/itinerary/compute
    body: {"flightPaths": [["SFO", "ATL"], ["ATL", "GSO"], ...]}
    200:  {"itinerary": ["SFO", "GSO"]}
    400:  {"errorKind": "...", "errorMessage": "..."}
"""
from fastapi import APIRouter

from flight_itinerary.models.schemas import ErrorOut, FlightItineraryIn, FlightItineraryOut
from flight_itinerary.services.itinerary_engine import compute_itinerary

router = APIRouter()


@router.post(
    "/compute",
    response_model=FlightItineraryOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def compute(body: FlightItineraryIn) -> FlightItineraryOut:
    """
    Given unordered flight paths, return the starting and ending airport of
    the single trail they form. ItineraryError is turned into a 400 by the
    app-level exception handler.
    """
    return compute_itinerary(body.flight_paths)
