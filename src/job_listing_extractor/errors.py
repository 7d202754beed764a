class ListingError(Exception):
    """
    Base class for failures surfaced by the listing extractor and its HTTP API.
    Each error knows the HTTP status it maps to and a message safe to show callers.
    """

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(ListingError):
    """Empty or unparseable URL. Raised before any network I/O."""

    status_code = 400


class UpstreamFetchFailed(ListingError):
    """
    The target page could not be fetched.

    upstream_status is the HTTP status returned by the target site, or None
    when the request failed at the network level. A bad upstream status is a
    caller-correctable condition (dead or wrong URL) and maps to 400.
    """

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message, status_code=400 if upstream_status is not None else 500)
        self.upstream_status = upstream_status


class InternalError(ListingError):
    status_code = 500


class AuthenticationError(ListingError):
    status_code = 401
