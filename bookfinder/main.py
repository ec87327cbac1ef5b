import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from bookfinder.config import settings
from bookfinder.models import BookDetails, BookListResponse, HealthResponse
from bookfinder.presentation import to_details, to_summary
from bookfinder.services.finder import BookFinder
from bookfinder.services.google_books import GoogleBooksClient

logger = logging.getLogger(__name__)

finder: BookFinder | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global finder
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    book_search = GoogleBooksClient()
    finder = BookFinder(book_search)
    logger.info("Book search backed by %s", book_search.search_url)
    yield
    finder.close()
    finder = None
    await book_search.aclose()


app = FastAPI(title="Book Finder", version="0.1.0", lifespan=lifespan)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version="0.1.0")


@app.get("/books", response_model=BookListResponse)
async def search_books(q: str = ""):
    assert finder is not None
    result = await finder.search(q)
    return BookListResponse(
        books=[to_summary(record) for record in result.records],
        error=result.error,
    )


@app.get("/books/{book_id}", response_model=BookDetails)
async def book_details(book_id: str):
    assert finder is not None
    record = finder.find_by_id(book_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return to_details(record)
