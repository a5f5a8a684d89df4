import logging
from typing import List, Optional

import yaml

from post_api.errors import SerializationError
from post_api.schemas.frontmatter import QuotesDocument
from post_api.schemas.post import Quote

logger = logging.getLogger(__name__)


def quotes_ref_for(slug: str) -> str:
    return f"{slug}-quotes"


def serialize_quotes(slug: str, quotes: Optional[List[Quote]]) -> str:
    """
    Build the YAML document for a book note's quotes file.

    Returns an empty string when there is nothing to write; callers treat
    that as "skip the quotes file".
    """
    if not quotes:
        return ""

    document = QuotesDocument(bookSlug=slug, quotes=quotes)
    try:
        return yaml.safe_dump(
            document.to_data(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as e:
        logger.error(f"Failed to serialize quotes for {slug}: {e}")
        raise SerializationError(
            "Error marshaling quotes to YAML.", detail=str(e)
        ) from e
