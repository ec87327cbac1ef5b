import itertools
import logging

from bookfinder.interfaces.book_search import BookSearchClient
from bookfinder.models import BookRecord, SearchErrorKind, SearchResult
from bookfinder.services.result_store import ResultStore

logger = logging.getLogger(__name__)


class BookFinder:
    def __init__(self, book_search: BookSearchClient, store: ResultStore | None = None) -> None:
        self._search = book_search
        self._store = store if store is not None else ResultStore()
        self._sequence = itertools.count(1)
        self._latest = 0
        self._closed = False
        self._last_error: SearchErrorKind | None = None

    @property
    def store(self) -> ResultStore:
        return self._store

    @property
    def books(self) -> tuple[BookRecord, ...]:
        return self._store.records

    @property
    def last_error(self) -> SearchErrorKind | None:
        return self._last_error

    async def search(self, query: str) -> SearchResult:
        """Run a search and publish its records unless a newer search was issued meanwhile."""
        token = next(self._sequence)
        self._latest = token

        result = await self._search.search(query)

        if self._closed:
            logger.debug("Finder closed; dropping results for %r", query)
        elif token != self._latest:
            logger.debug(
                "Discarding stale results for %r (request %d, latest %d)",
                query,
                token,
                self._latest,
            )
        else:
            self._last_error = result.error
            self._store.replace(result.records)
        return result

    def find_by_id(self, book_id: str) -> BookRecord | None:
        return self._store.find_by_id(book_id)

    def close(self) -> None:
        self._closed = True
