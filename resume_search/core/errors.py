from typing import Optional

GENERIC_SEARCH_ERROR = "Search failed"


class ResumeSearchError(Exception):
    """Base class for all client errors."""

    pass


class SearchApiError(ResumeSearchError):
    """Backend answered a search or feedback call with a failure."""

    def __init__(self, status_code: Optional[int] = None, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail or GENERIC_SEARCH_ERROR)


class StorageError(ResumeSearchError):
    """Local preference storage could not be written."""

    pass
