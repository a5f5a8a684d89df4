import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from post_api.schemas.post import BookCover, Quote


class Frontmatter(BaseModel):
    # Field order is the key order written to the post file
    title: str
    pubDate: datetime.datetime
    author: str
    description: Optional[str] = None
    postType: str
    tags: List[str] = Field(default_factory=list)
    series: Optional[str] = None
    draft: bool = False
    bookTitle: Optional[str] = None
    bookAuthor: Optional[str] = None
    bookCover: Optional[BookCover] = None
    quotesRef: Optional[str] = None
    bookTags: List[str] = Field(default_factory=list)

    def to_metadata(self) -> Dict[str, Any]:
        """Frontmatter as a plain dict with empty optional values left out."""
        data = self.model_dump(exclude_none=True)
        return {
            key: value
            for key, value in data.items()
            if value != [] and value != "" and value != {}
        }


class QuotesDocument(BaseModel):
    bookSlug: str
    quotes: List[Quote]

    def to_data(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
