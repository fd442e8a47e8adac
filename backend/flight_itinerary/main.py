import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flight_itinerary.api.v1.router import api_router
from flight_itinerary.config import Settings, settings as default_settings
from flight_itinerary.models.schemas import ErrorOut, HealthOut
from flight_itinerary.services.errors import ItineraryError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong. Please try again later."


def _error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    body = ErrorOut(error_kind=kind, error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def itinerary_error_handler(request: Request, exc: ItineraryError) -> JSONResponse:
    # already logged where it was raised
    return _error_response(400, exc.kind, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.error("Failed to parse payload with error: %s", message)
    return _error_response(400, "InvalidRequestBody", message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # the server re-raises after this handler and logs the traceback itself
    logger.error("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return _error_response(500, "InternalError", INTERNAL_ERROR_MESSAGE)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            "Serving %s on %s:%s",
            app_settings.server.name, app_settings.server.host, app_settings.server.port,
        )

        yield

        # Shutdown
        logger.info("Shutting down %s", app_settings.server.name)

    app = FastAPI(
        title="Flight Itinerary API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ItineraryError, itinerary_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router)

    @app.get("/api/v1/health", response_model=HealthOut)
    async def health() -> HealthOut:
        return HealthOut(status="ok", service=app_settings.server.name)

    return app


app = create_app()
