from abc import ABC, abstractmethod

from job_listing_extractor.models import StructuredJobPosting


class ListingParser(ABC):
    """
    Abstract base class for listing field sources.
    """

    @abstractmethod
    def parse(self, html: str) -> StructuredJobPosting:
        """
        Extract candidate listing fields from raw page HTML.
        Fields the source cannot supply are left empty.
        """
        pass
