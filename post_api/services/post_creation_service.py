import logging
from pathlib import Path
from typing import Optional

from post_api.errors import ConflictError, MissingFieldsError, PostCreationError
from post_api.schemas.post import CreatePostResponse, PostRequest
from post_api.services.frontmatter_service import (
    assemble_post_content,
    serialize_frontmatter,
    to_frontmatter,
)
from post_api.services.quotes_service import quotes_ref_for, serialize_quotes
from post_api.settings import Settings
from post_api.utils import generate_slug

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Post created successfully!"


class PostCreationService:
    def __init__(self, repo, settings: Settings):
        self.repo = repo
        self.settings = settings

    def create_post(self, payload: PostRequest) -> CreatePostResponse:
        """
        Create a post file and, for book notes with quotes, its quotes file.

        The quotes file is staged under a temporary name and only moved into
        place once the post file exists, so a failed request leaves neither
        file behind.
        """
        _require_fields(payload)

        slug = generate_slug(payload.title)
        filename = f"{slug}{self.settings.POST_EXTENSION}"

        if self.repo.post_exists(filename):
            logger.warning(f"Refusing to overwrite existing post {filename}")
            raise ConflictError.for_filename(filename)

        fm = to_frontmatter(payload, default_author=self.settings.DEFAULT_AUTHOR)

        quotes_ref: Optional[str] = None
        quotes_doc = ""
        if payload.is_book_note:
            quotes_doc = serialize_quotes(slug, payload.inlineQuotes)
            if quotes_doc:
                quotes_ref = quotes_ref_for(slug)

        staged: Optional[Path] = None
        post_written: Optional[Path] = None
        try:
            if quotes_ref:
                staged = self.repo.stage_quotes(quotes_ref, quotes_doc)
                fm.quotesRef = quotes_ref

            content = assemble_post_content(
                serialize_frontmatter(fm), payload.bodyContent or ""
            )
            post_written = self.repo.create_post(filename, content)

            if staged is not None:
                self.repo.publish_quotes(staged, quotes_ref)
                staged = None
        except Exception as e:
            self.repo.discard(staged)
            # A post written before the quotes failed would point at nothing
            if post_written is not None:
                self.repo.discard(post_written)
            if isinstance(e, PostCreationError) and e.status_code < 500:
                logger.warning(f"Post {filename} not created: {e.message}")
            else:
                logger.error(f"Failed to create post {filename}: {e}")
            raise

        logger.info(f"Created post {filename} (type={fm.postType})")

        return CreatePostResponse(
            message=SUCCESS_MESSAGE,
            filename=filename,
            path=f"{self.settings.BLOG_PATH_PREFIX}/{slug}",
            newSlug=slug,
            title=fm.title,
            quotesRef=quotes_ref,
        )


def _require_fields(payload: PostRequest) -> None:
    if not payload.title or not payload.pubDate or payload.postType is None:
        raise MissingFieldsError("Missing required fields (title, pubDate, postType)")
