# Aggregates every v1 route under /api/v1


from fastapi import APIRouter

from flight_itinerary.api.v1.routes.itinerary import router as itinerary_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(itinerary_router, prefix="/itinerary", tags=["itinerary"])
