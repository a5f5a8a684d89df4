from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class PostType(str, Enum):
    ARTICLE = "article"
    BOOK_NOTE = "bookNote"


class BookCover(BaseModel):
    imageName: Optional[str] = None
    alt: Optional[str] = None
    originalWidth: Optional[int] = None

    def is_empty(self) -> bool:
        return not (self.imageName or self.alt or self.originalWidth)


class Quote(BaseModel):
    text: str
    quoteAuthor: Optional[str] = None
    tags: Optional[List[str]] = None
    quoteSource: Optional[str] = None


class PostRequest(BaseModel):
    """Payload sent by the authoring UI to create a post."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    pubDate: Optional[str] = None
    postType: Optional[PostType] = None
    description: Optional[str] = None
    series: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    draft: bool = False
    bodyContent: Optional[str] = None

    # Book note only
    bookTitle: Optional[str] = None
    bookAuthor: Optional[str] = None
    bookTags: List[str] = Field(default_factory=list)
    bookCoverImageName: Optional[str] = None
    bookCoverAlt: Optional[str] = None
    bookCover: Optional[BookCover] = None
    inlineQuotes: List[Quote] = Field(default_factory=list)

    @field_validator("postType", mode="before")
    @classmethod
    def _blank_post_type_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("draft", mode="before")
    @classmethod
    def _null_draft_is_false(cls, value):
        return False if value is None else value

    @field_validator("inlineQuotes", mode="before")
    @classmethod
    def _null_quotes_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("tags", "bookTags", mode="before")
    @classmethod
    def _split_tag_string(cls, value):
        # The UI sends either a list or a comma separated string
        if value is None:
            return []
        if isinstance(value, str):
            return value.split(",")
        return value

    @field_validator("tags", "bookTags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)

    @property
    def is_book_note(self) -> bool:
        return self.postType == PostType.BOOK_NOTE


class CreatePostResponse(BaseModel):
    message: str
    filename: str
    path: str
    newSlug: str
    title: str
    quotesRef: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str
    errorDetail: Optional[str] = None


def normalize_tags(tags: List[str]) -> List[str]:
    """Trim, drop blanks and de-duplicate while keeping first-seen order."""
    seen = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen
