from bs4 import BeautifulSoup

from job_listing_extractor.models import StructuredJobPosting
from job_listing_extractor.parsers.base import ListingParser
from job_listing_extractor.text import clean_text


class MetaTagParser(ListingParser):
    """
    Reads the Open Graph and standard meta tags most pages carry for
    social previews. Location is never available from meta tags.
    """

    def parse(self, html: str) -> StructuredJobPosting:
        soup = BeautifulSoup(html, "html.parser")

        return StructuredJobPosting(
            title=self._meta_content(soup, "property", "og:title") or self._document_title(soup),
            description=(
                self._meta_content(soup, "property", "og:description")
                or self._meta_content(soup, "name", "description")
            ),
            company=self._meta_content(soup, "property", "og:site_name"),
        )

    @staticmethod
    def _meta_content(soup: BeautifulSoup, attribute: str, value: str) -> str:
        """
        Return the cleaned content of the first <meta> whose identifying
        attribute equals value (case-insensitive) and whose content is non-empty.
        """
        matches = soup.find_all(
            "meta",
            attrs={attribute: lambda v: bool(v) and v.strip().lower() == value},
        )
        for tag in matches:
            content = clean_text(str(tag.get("content") or ""))
            if content:
                return content
        return ""

    @staticmethod
    def _document_title(soup: BeautifulSoup) -> str:
        title = soup.find("title")
        if title is None:
            return ""
        return clean_text(title.get_text())
