import logging
import re

import httpx

from job_listing_extractor.errors import (
    InternalError,
    InvalidInput,
    ListingError,
    UpstreamFetchFailed,
)
from job_listing_extractor.models import ListingResult, StructuredJobPosting
from job_listing_extractor.parsers.base import ListingParser
from job_listing_extractor.parsers.jsonld import JsonLdParser
from job_listing_extractor.parsers.meta_tags import MetaTagParser
from job_listing_extractor.text import clean_text, title_case_words

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 15.0  # seconds
USER_AGENT = "Mozilla/5.0 (compatible; JobAssistantBot/1.0)"
ACCEPT = "text/html,application/xhtml+xml"

DEFAULT_TITLE = "Untitled Role"
DEFAULT_COMPANY = "Unknown Company"
DEFAULT_LOCATION = "Not specified"
DEFAULT_DESCRIPTION = ""

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[-_]+")
_FORBIDDEN_HOST_RE = re.compile(r"[\s%<>^|\\\"`{}#/?@\[\]]")


def normalize_url(raw_url: str) -> httpx.URL:
    """
    Turn free-text input into an absolute http(s) URL.
    Input without a scheme is assumed to be https.
    """
    raw_url = (raw_url or "").strip()
    if not raw_url:
        raise InvalidInput("URL is required")

    candidate = raw_url if _SCHEME_RE.match(raw_url) else f"https://{raw_url}"
    try:
        url = httpx.URL(candidate)
    except (httpx.InvalidURL, ValueError):
        raise InvalidInput("Invalid URL") from None

    # httpx percent-encodes hosts it cannot parse instead of rejecting them
    if not url.host or _FORBIDDEN_HOST_RE.search(url.host):
        raise InvalidInput("Invalid URL")
    return url


def infer_company_from_host(hostname: str) -> str:
    """
    Guess a company name from a hostname, e.g. "www.acme-hiring.com" -> "Acme Hiring".
    """
    label = _WWW_RE.sub("", hostname).split(".")[0]
    return title_case_words(clean_text(_SEPARATOR_RE.sub(" ", label)))


def compose_listing(
    url: str,
    structured: StructuredJobPosting,
    meta: StructuredJobPosting,
    hostname: str,
) -> ListingResult:
    """
    Pick each field from the highest-priority source that has it:
    structured data, then meta tags, then (company only) the hostname,
    then a fixed default.
    """
    return ListingResult(
        url=url,
        title=structured.title or meta.title or DEFAULT_TITLE,
        company=(
            structured.company
            or meta.company
            or infer_company_from_host(hostname)
            or DEFAULT_COMPANY
        ),
        location=structured.location or DEFAULT_LOCATION,
        description=structured.description or meta.description or DEFAULT_DESCRIPTION,
    )


class JobListingExtractor:
    """
    Fetches an arbitrary job posting page and derives a normalized listing.

    Each call makes exactly one GET request (redirects followed) and never
    retries. The extractor holds no per-call state, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT,
        user_agent: str = USER_AGENT,
        structured_parser: ListingParser | None = None,
        meta_parser: ListingParser | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.structured_parser = structured_parser or JsonLdParser()
        self.meta_parser = meta_parser or MetaTagParser()

    async def extract(self, url: str) -> ListingResult:
        """
        Extract a listing from the page at url.

        Raises InvalidInput, UpstreamFetchFailed or InternalError; any other
        fault during parsing is wrapped in InternalError.
        """
        try:
            target = normalize_url(url)
            final_url, html = await self._fetch_page(target)

            structured = self.structured_parser.parse(html)
            meta = self.meta_parser.parse(html)
            listing = compose_listing(str(final_url), structured, meta, final_url.host)
        except ListingError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error extracting listing from {url!r}")
            raise InternalError(str(e) or e.__class__.__name__) from e

        logger.info(f"Extracted listing '{listing.title}' at {listing.company} from {final_url}")
        return listing

    async def _fetch_page(self, url: httpx.URL) -> tuple[httpx.URL, str]:
        """Fetch the page once, following redirects. Returns the final URL and body."""
        logger.info(f"Fetching {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.user_agent, "Accept": ACCEPT},
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise UpstreamFetchFailed("Failed to fetch page") from e

        if not response.is_success:
            logger.warning(f"Fetching {url} returned HTTP {response.status_code}")
            raise UpstreamFetchFailed(
                f"Failed to fetch page ({response.status_code})",
                upstream_status=response.status_code,
            )

        return response.url, response.text


async def extract(url: str) -> ListingResult:
    """Extract a listing using a default-configured extractor."""
    return await JobListingExtractor().extract(url)
