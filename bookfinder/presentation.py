from bookfinder.models import BookDetails, BookRecord, BookSummary

LIST_AUTHOR_FALLBACK = "Unknown author"
DETAILS_AUTHOR_FALLBACK = "Unknown"


def secure_thumbnail_url(url: str | None) -> str | None:
    if url is None:
        return None
    return url.replace("http://", "https://")


def format_authors(authors: list[str] | None, fallback: str = LIST_AUTHOR_FALLBACK) -> str:
    if authors is None:
        return fallback
    return ", ".join(authors)


def _thumbnail(record: BookRecord) -> str | None:
    links = record.volume_info.image_links
    return secure_thumbnail_url(links.thumbnail if links else None)


def to_summary(record: BookRecord) -> BookSummary:
    return BookSummary(
        id=record.id,
        title=record.volume_info.title,
        authors=format_authors(record.volume_info.authors),
        thumbnail_url=_thumbnail(record),
    )


def to_details(record: BookRecord) -> BookDetails:
    info = record.volume_info
    return BookDetails(
        id=record.id,
        title=info.title,
        authors=format_authors(info.authors, DETAILS_AUTHOR_FALLBACK),
        # Empty strings are hidden on the details screen, same as absent values.
        publisher=info.publisher or None,
        published_date=info.published_date or None,
        page_count=info.page_count,
        thumbnail_url=_thumbnail(record),
    )
