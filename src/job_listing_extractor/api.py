import logging
from typing import Annotated, Any

from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_listing_extractor import config
from job_listing_extractor.auth import AuthenticatedUser, SupabaseAuthVerifier, parse_bearer_token
from job_listing_extractor.errors import AuthenticationError, ListingError
from job_listing_extractor.extractor import JobListingExtractor
from job_listing_extractor.models import ErrorResponse, ListingRequest, ListingResult

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def get_extractor() -> JobListingExtractor:
    return JobListingExtractor(timeout=config.FETCH_TIMEOUT)


def get_auth_verifier() -> SupabaseAuthVerifier:
    return SupabaseAuthVerifier(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)


async def require_user(
    authorization: Annotated[str | None, Header()] = None,
    verifier: SupabaseAuthVerifier = Depends(get_auth_verifier),
) -> AuthenticatedUser:
    """Resolve the bearer credential on the request to a user, or fail with 401."""
    token = parse_bearer_token(authorization)
    if not token:
        raise AuthenticationError("Missing Authorization header")
    return await verifier.verify(token)


def _error_response(error: ListingError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(error=error.message).model_dump(),
    )


async def _read_listing_request(request: Request) -> ListingRequest:
    """
    Read the JSON body leniently: an unreadable body or a non-string url is
    treated as a missing URL.
    """
    try:
        body: Any = await request.json()
    except ValueError:
        body = {}

    url = body.get("url") if isinstance(body, dict) else None
    return ListingRequest(url=url if isinstance(url, str) else "")


def create_app() -> FastAPI:
    app = FastAPI(title="Job Listing Extractor")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.exception_handler(ListingError)
    async def listing_error_handler(request: Request, exc: ListingError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error serving {request.url.path}")
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/scrape-job-url",
        response_model=ListingResult,
        responses={status: {"model": ErrorResponse} for status in (400, 401, 500)},
    )
    async def scrape_job_url(
        request: Request,
        user: AuthenticatedUser = Depends(require_user),
        extractor: JobListingExtractor = Depends(get_extractor),
    ) -> ListingResult:
        listing_request = await _read_listing_request(request)
        logger.info(f"User {user.id} requested listing for {listing_request.url!r}")
        return await extractor.extract(listing_request.url)

    return app


app = create_app()
