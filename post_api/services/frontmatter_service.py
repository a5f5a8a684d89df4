import datetime
import logging
import re
from typing import Optional

import yaml
from frontmatter.default_handlers import YAMLHandler

from post_api.errors import InvalidDateError, SerializationError
from post_api.schemas.frontmatter import Frontmatter
from post_api.schemas.post import BookCover, PostRequest

logger = logging.getLogger(__name__)

# Earlier formats win when a value matches more than one
PUB_DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d",
)

# strptime takes at most microseconds
_extra_fraction_re = re.compile(r"(\.\d{6})\d+")

_yaml_handler = YAMLHandler()

FLOW_LIST_KEYS = ("tags", "bookTags")


class _FlowList(list):
    pass


class _FrontmatterDumper(yaml.SafeDumper):
    pass


_FrontmatterDumper.add_representer(
    _FlowList,
    lambda dumper, data: dumper.represent_sequence(
        "tag:yaml.org,2002:seq", data, flow_style=True
    ),
)


def parse_pub_date(value: str) -> datetime.datetime:
    """
    Parse a publication date sent by the UI.

    Values without a zone are read as UTC so every stored date is aware.
    """
    text = _extra_fraction_re.sub(r"\1", (value or "").strip())
    for fmt in PUB_DATE_FORMATS:
        try:
            parsed = datetime.datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=datetime.timezone.utc)
        return parsed

    raise InvalidDateError(
        "Error processing post data.",
        detail=f"failed to parse pubDate '{value}'",
    )


def resolve_book_cover(payload: PostRequest) -> Optional[BookCover]:
    """Nested bookCover wins, else build one from the flat fields, else none."""
    if payload.bookCover is not None and not payload.bookCover.is_empty():
        return payload.bookCover
    if payload.bookCoverImageName or payload.bookCoverAlt:
        return BookCover(
            imageName=payload.bookCoverImageName or None,
            alt=payload.bookCoverAlt or None,
        )
    return None


def to_frontmatter(payload: PostRequest, default_author: str) -> Frontmatter:
    fm = Frontmatter(
        title=payload.title,
        pubDate=parse_pub_date(payload.pubDate),
        author=default_author,
        description=payload.description,
        postType=payload.postType.value,
        tags=payload.tags,
        series=payload.series,
        draft=payload.draft,
    )

    if payload.is_book_note:
        fm.bookTitle = payload.bookTitle
        fm.bookAuthor = payload.bookAuthor
        fm.bookCover = resolve_book_cover(payload)
        fm.bookTags = payload.bookTags

    return fm


def serialize_frontmatter(fm: Frontmatter) -> str:
    try:
        metadata = fm.to_metadata()
        for key in FLOW_LIST_KEYS:
            if key in metadata:
                metadata[key] = _FlowList(metadata[key])
        return _yaml_handler.export(
            metadata, Dumper=_FrontmatterDumper, sort_keys=False
        )
    except yaml.YAMLError as e:
        logger.error(f"Failed to serialize frontmatter for '{fm.title}': {e}")
        raise SerializationError(
            "Error generating post content.", detail=str(e)
        ) from e


def assemble_post_content(frontmatter_doc: str, body: str) -> str:
    """Join a frontmatter document and the raw body into the post file text."""
    return f"---\n{frontmatter_doc.strip()}\n---\n\n{body}"
