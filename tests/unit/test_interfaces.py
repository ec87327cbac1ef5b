import pytest

from bookfinder.interfaces.book_search import BookSearchClient


class TestBookSearchClientABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BookSearchClient()

    def test_subclass_must_implement_fetch(self):
        class IncompleteSearch(BookSearchClient):
            pass

        with pytest.raises(TypeError):
            IncompleteSearch()

    def test_search_is_provided(self):
        class MinimalSearch(BookSearchClient):
            async def fetch(self, query):
                return []

        assert callable(MinimalSearch().search)
