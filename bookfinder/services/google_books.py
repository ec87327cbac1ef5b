import logging

import httpx

from bookfinder.config import settings
from bookfinder.errors import MappingError, SearchHttpStatusError, SearchTransportError
from bookfinder.interfaces.book_search import BookSearchClient
from bookfinder.mapper import map_search_response
from bookfinder.models import BookRecord

logger = logging.getLogger(__name__)


class GoogleBooksClient(BookSearchClient):
    SEARCH_PATH = "/volumes"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        if client is not None and timeout is not None:
            raise ValueError(
                "timeout applies only to the client built here; configure it on the injected client"
            )
        self._base_url = (base_url or settings.books_api_base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout
        )

    @property
    def search_url(self) -> str:
        return f"{self._base_url}{self.SEARCH_PATH}"

    async def fetch(self, query: str) -> list[BookRecord]:
        logger.debug("GET %s q=%r", self.search_url, query)
        try:
            response = await self._client.get(self.search_url, params={"q": query})
        except httpx.HTTPError as e:
            raise SearchTransportError(f"Request to {self.search_url} failed: {e}") from e

        if not response.is_success:
            raise SearchHttpStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MappingError(f"Response body is not valid JSON: {e}") from e

        records = map_search_response(payload)
        logger.debug("Search for %r returned %d records", query, len(records))
        return records

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
