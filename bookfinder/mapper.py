from typing import Any

from pydantic import ValidationError

from bookfinder.errors import MappingError
from bookfinder.models import BookRecord, SearchResponse


def map_search_response(payload: Any) -> list[BookRecord]:
    """Map a decoded ``volumes`` response body into book records.

    Input order is preserved. A response without ``items`` (or with
    ``"items": null``) maps to an empty list. Any record that violates the
    schema, e.g. a volume without a title, fails the whole response.
    """
    try:
        response = SearchResponse.model_validate(payload)
    except ValidationError as e:
        raise MappingError(f"Invalid search response: {e}") from e
    return list(response.items or [])
