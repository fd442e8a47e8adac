"""
Run the itinerary service.

    python -m flight_itinerary --config config/config.yaml
    python -m flight_itinerary --port 9000 --log-level debug
"""
import argparse
import logging

import uvicorn

from flight_itinerary.config import Settings, load_settings
from flight_itinerary.main import create_app
from flight_itinerary.utils.log import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-itinerary",
        description="Serve the flight itinerary API (start/end airport of a set of flight paths)",
    )
    parser.add_argument("-c", "--config", help="YAML config file (server / logging sections)")
    parser.add_argument("--host", help="Override server.host")
    parser.add_argument("--port", type=int, help="Override server.port")
    parser.add_argument("--log-level", help="Override logging.default-level (e.g. debug, info)")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Load settings from file/env and apply command-line overrides."""
    settings = load_settings(args.config)

    server_overrides = {k: v for k, v in (("host", args.host), ("port", args.port)) if v is not None}
    logging_overrides = {"default_level": args.log_level} if args.log_level else {}
    if not server_overrides and not logging_overrides:
        return settings

    return Settings(
        server=settings.server.model_dump() | server_overrides,
        logging=settings.logging.model_dump() | logging_overrides,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)

    configure_logging(settings.logging.default_level)
    logger.info("Starting %s with uvicorn", settings.server.name)

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,  # keep the root handler installed above
    )


if __name__ == "__main__":
    main()
