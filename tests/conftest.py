import asyncio

import httpx
import pytest

from bookfinder.errors import SearchError
from bookfinder.interfaces.book_search import BookSearchClient
from bookfinder.models import BookRecord, ImageLinks, VolumeInfo

BASE_URL = "https://books.test/v1"


class MockBookSearchClient(BookSearchClient):
    def __init__(self, results: list[BookRecord] | None = None, error: SearchError | None = None):
        self._results = results or []
        self._error = error
        self.queries: list[str] = []

    async def fetch(self, query: str) -> list[BookRecord]:
        self.queries.append(query)
        if self._error:
            raise self._error
        return self._results


class GatedBookSearchClient(BookSearchClient):
    """Holds each fetch open until the test releases it, to control completion order."""

    def __init__(self, results_by_query: dict[str, list[BookRecord]]):
        self._results = results_by_query
        self.gates: dict[str, asyncio.Event] = {q: asyncio.Event() for q in results_by_query}
        self.started: list[str] = []

    async def fetch(self, query: str) -> list[BookRecord]:
        self.started.append(query)
        await self.gates[query].wait()
        return self._results[query]


def make_record(book_id: str, title: str, **volume_fields) -> BookRecord:
    return BookRecord(id=book_id, volume_info=VolumeInfo(title=title, **volume_fields))


def json_transport(payload=None, status_code: int = 200, requests: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture
def tolkien_payload() -> dict:
    return {
        "kind": "books#volumes",
        "totalItems": 2,
        "items": [
            {
                "id": "A1",
                "volumeInfo": {
                    "title": "The Hobbit",
                    "authors": ["J. R. R. Tolkien"],
                    "publishedDate": "1937-09-21",
                    "pageCount": 310,
                    "publisher": "George Allen & Unwin",
                    "imageLinks": {"thumbnail": "http://books.google.com/x.jpg"},
                },
            },
            {
                "id": "A2",
                "volumeInfo": {
                    "title": "The Fellowship of the Ring",
                },
            },
        ],
    }


@pytest.fixture
def sample_records() -> list[BookRecord]:
    return [
        make_record(
            "A1",
            "The Hobbit",
            authors=["J. R. R. Tolkien"],
            published_date="1937-09-21",
            page_count=310,
            publisher="George Allen & Unwin",
            image_links=ImageLinks(thumbnail="http://books.google.com/x.jpg"),
        ),
        make_record("A2", "The Fellowship of the Ring"),
    ]
