from pydantic import BaseModel


class ListingRequest(BaseModel):
    """Inbound request body: a free-text URL, possibly without a scheme."""

    url: str = ""


class StructuredJobPosting(BaseModel):
    """
    Candidate listing fields produced by a single field source.
    Empty strings mean the source had nothing for that field.
    """

    title: str = ""
    description: str = ""
    company: str = ""
    location: str = ""


class ListingResult(BaseModel):
    """
    Normalized job listing returned to the caller.
    title, company and location are never empty; description may be.
    """

    url: str
    title: str
    company: str
    location: str
    description: str


class ErrorResponse(BaseModel):
    error: str
