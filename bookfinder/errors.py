from bookfinder.models import SearchErrorKind


class SearchError(Exception):
    """Base class for failures of a single book search request."""

    kind: SearchErrorKind


class SearchTransportError(SearchError):
    kind = SearchErrorKind.TRANSPORT


class SearchHttpStatusError(SearchError):
    kind = SearchErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Search endpoint returned HTTP {status_code}")
        self.status_code = status_code


class MappingError(SearchError):
    kind = SearchErrorKind.MAPPING
