from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(frozen=True)


class ImageLinks(FrozenCamelModel):
    thumbnail: str


class VolumeInfo(FrozenCamelModel):
    title: str
    authors: list[str] | None = None
    published_date: str | None = None
    page_count: int | None = None
    publisher: str | None = None
    image_links: ImageLinks | None = None


class BookRecord(FrozenCamelModel):
    id: str
    volume_info: VolumeInfo


class SearchResponse(FrozenCamelModel):
    items: list[BookRecord] | None = None


class SearchErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MAPPING = "mapping"


class SearchResult(FrozenCamelModel):
    records: list[BookRecord] = Field(default_factory=list)
    error: SearchErrorKind | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None


class BookSummary(CamelModel):
    id: str
    title: str
    authors: str
    thumbnail_url: str | None = None


class BookDetails(CamelModel):
    id: str
    title: str
    authors: str
    publisher: str | None = None
    published_date: str | None = None
    page_count: int | None = None
    thumbnail_url: str | None = None


class BookListResponse(CamelModel):
    books: list[BookSummary] = []
    error: SearchErrorKind | None = None


class HealthResponse(CamelModel):
    status: str
    version: str
