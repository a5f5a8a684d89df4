import re

FALLBACK_SLUG = "untitled-post"

_whitespace_re = re.compile(r"\s+")
_non_word_re = re.compile(r"[^\w-]+", re.ASCII)
_hyphens_re = re.compile(r"--+")


def generate_slug(title: str) -> str:
    """
    Build a URL and filename safe slug from a post title.

    Underscores survive as content characters; anything outside the ASCII
    word class is dropped. Never returns an empty string.
    """
    slug = (title or "").strip().lower()
    slug = _whitespace_re.sub("-", slug)
    slug = _non_word_re.sub("", slug)
    slug = _hyphens_re.sub("-", slug)
    slug = slug.strip("-")
    return slug or FALLBACK_SLUG
