import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from job_listing_extractor.models import StructuredJobPosting
from job_listing_extractor.parsers.base import ListingParser
from job_listing_extractor.text import clean_text, strip_tags

logger = logging.getLogger(__name__)

JSONLD_SCRIPT_TYPE = "application/ld+json"
JOB_POSTING_TYPE = "jobposting"
ADDRESS_PARTS = ("addressLocality", "addressRegion", "addressCountry")


def _is_jsonld_type(value: str | None) -> bool:
    return bool(value) and value.strip().lower() == JSONLD_SCRIPT_TYPE


class JsonLdParser(ListingParser):
    """
    Extracts a schema.org JobPosting from embedded JSON-LD blocks.

    Blocks are visited in document order and each may hold a single object
    or an array of objects. The first object whose @type mentions
    "jobposting" wins; malformed blocks are skipped.
    """

    def parse(self, html: str) -> StructuredJobPosting:
        soup = BeautifulSoup(html, "html.parser")

        for script in soup.find_all("script", attrs={"type": _is_jsonld_type}):
            raw = (script.string or "").strip()
            if not raw:
                continue

            try:
                data = json.loads(raw)
            except (ValueError, RecursionError) as e:
                logger.debug(f"Skipping malformed JSON-LD block: {e}")
                continue

            nodes = data if isinstance(data, list) else [data]
            for node in nodes:
                if isinstance(node, dict) and self._is_job_posting(node):
                    return self._extract_job_posting(node)

        return StructuredJobPosting()

    @staticmethod
    def _is_job_posting(node: dict[str, Any]) -> bool:
        node_type = node.get("@type") or ""
        if isinstance(node_type, list):
            node_type = ",".join(str(t) for t in node_type)
        return JOB_POSTING_TYPE in str(node_type).lower()

    def _extract_job_posting(self, node: dict[str, Any]) -> StructuredJobPosting:
        return StructuredJobPosting(
            title=clean_text(self._as_text(node.get("title"))),
            description=clean_text(strip_tags(self._as_text(node.get("description")))),
            company=clean_text(self._organization_name(node.get("hiringOrganization"))),
            location=self._location(node.get("jobLocation")),
        )

    @staticmethod
    def _as_text(value: Any) -> str:
        if value is None or isinstance(value, (dict, list)):
            return ""
        return str(value)

    def _organization_name(self, organization: Any) -> str:
        """hiringOrganization may be an Organization object or a bare name."""
        if isinstance(organization, dict):
            return self._as_text(organization.get("name"))
        return self._as_text(organization)

    def _location(self, job_location: Any) -> str:
        """Join locality, region and country of the first jobLocation's address."""
        if isinstance(job_location, list):
            job_location = job_location[0] if job_location else None
        if not isinstance(job_location, dict):
            return ""

        address = job_location.get("address")
        if not isinstance(address, dict):
            return ""

        parts = []
        for key in ADDRESS_PARTS:
            value = address.get(key)
            # addressCountry is sometimes a Country object
            if isinstance(value, dict):
                value = value.get("name")
            text = self._as_text(value)
            if text:
                parts.append(text)

        return clean_text(", ".join(parts))
