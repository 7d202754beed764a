import argparse
import asyncio
import logging
import sys

import uvicorn

from job_listing_extractor.errors import ListingError
from job_listing_extractor.extractor import HTTP_TIMEOUT, JobListingExtractor

# Set up logging once, in the application entry point only
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


async def run_extract(url: str, timeout: float) -> int:
    """Extract a single listing and print it as JSON. Returns the process exit code."""
    extractor = JobListingExtractor(timeout=timeout)
    try:
        listing = await extractor.extract(url)
    except ListingError as e:
        logger.error(f"Could not extract listing: {e.message}")
        return 1

    print(listing.model_dump_json(indent=2))
    return 0


def run_server(host: str, port: int) -> None:
    """Serve the HTTP API with uvicorn."""
    logger.info(f"Starting job listing API on {host}:{port}")
    uvicorn.run("job_listing_extractor.api:app", host=host, port=port)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="job-listing-extractor",
        description="Extract a structured job listing (title, company, location, description) "
        "from a job posting URL, or serve the extraction HTTP API.",
    )

    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "url",
        nargs="?",
        default=None,
        help="Job posting URL to extract. The scheme may be omitted.",
    )
    mode.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of extracting a single URL.",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=HTTP_TIMEOUT,
        metavar="SECONDS",
        help=f"Timeout for fetching the page (default: {HTTP_TIMEOUT:g}).",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="Host to bind with --serve.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind with --serve.")

    return parser.parse_args(argv)


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    args = parse_args(argv)

    if args.serve:
        run_server(args.host, args.port)
        return

    if args.timeout <= 0:
        logger.error("--timeout must be a positive number.")
        sys.exit(1)

    sys.exit(asyncio.run(run_extract(args.url, args.timeout)))


if __name__ == "__main__":
    cli()
