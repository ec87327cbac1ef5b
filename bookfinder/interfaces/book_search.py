import logging
from abc import ABC, abstractmethod

from bookfinder.errors import SearchError
from bookfinder.models import BookRecord, SearchResult

logger = logging.getLogger(__name__)


class BookSearchClient(ABC):
    @abstractmethod
    async def fetch(self, query: str) -> list[BookRecord]:
        ...

    async def search(self, query: str) -> SearchResult:
        try:
            records = await self.fetch(query)
        except SearchError as e:
            logger.exception("Book search for %r failed (%s)", query, e.kind.value)
            return SearchResult(records=[], error=e.kind)
        return SearchResult(records=records)
