"""
CLI entry point for the tours API.

Usage:
    # Serve the API with uvicorn
    python -m natours.cli serve --port 3000

    # Validate the tours data file without starting the server
    python -m natours.cli check-data --file dev-data/data/tours-simple.json
"""

import argparse
import logging
import sys
from pathlib import Path

from natours.core.config import settings
from natours.domain.tours.errors import TourStoreLoadError
from natours.infrastructure.tours.json_file_repository import JsonFileTourRepository
from natours.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("natours.main:app", host=args.host, port=args.port, reload=args.reload)


def cmd_check_data(args: argparse.Namespace) -> int:
    """Load the data file the way startup does and report the result."""
    repository = JsonFileTourRepository(args.file)
    try:
        tours = repository.load_all()
    except TourStoreLoadError as exc:
        logger.error("%s", exc.message)
        return 1

    ids = [tour.id for tour in tours]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        logger.warning("Duplicate tour ids: %s", duplicates)
        return 1

    logger.info(
        "%d tours OK in %s (max id %s)", len(tours), repository.path, max(ids, default="-")
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Natours tours API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=settings.host, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on source changes (development)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    check_parser = subparsers.add_parser(
        "check-data", help="Validate the tours data file"
    )
    check_parser.add_argument(
        "--file", type=Path, default=settings.tours_data_file,
        help="Path to the tours JSON file",
    )
    check_parser.set_defaults(func=cmd_check_data)

    args = parser.parse_args(argv)
    return args.func(args) or 0


if __name__ == "__main__":
    sys.exit(main())
