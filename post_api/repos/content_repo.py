import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from post_api.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)


class FileContentRepo:
    """Posts and book quotes stored as files in two content directories."""

    def __init__(self, posts_dir: Path, quotes_dir: Path):
        self.posts_dir = Path(posts_dir)
        self.quotes_dir = Path(quotes_dir)

    def post_path(self, filename: str) -> Path:
        return self.posts_dir / filename

    def quotes_path(self, quotes_ref: str) -> Path:
        return self.quotes_dir / f"{quotes_ref}.yaml"

    def post_exists(self, filename: str) -> bool:
        return self.post_path(filename).exists()

    def create_post(self, filename: str, content: str) -> Path:
        """Write a new post file, refusing to replace an existing one."""
        path = self.post_path(filename)
        _ensure_dir(self.posts_dir, "blog")

        try:
            handle = open(path, "x", encoding="utf-8")
        except FileExistsError as e:
            raise ConflictError.for_filename(filename) from e
        except OSError as e:
            raise StorageError("Error writing post file.", detail=str(e)) from e

        try:
            with handle:
                handle.write(content)
        except OSError as e:
            self.discard(path)
            raise StorageError("Error writing post file.", detail=str(e)) from e

        logger.info(f"Created post file: {path}")
        return path

    def stage_quotes(self, quotes_ref: str, document: str) -> Path:
        """Write quotes to a temporary file next to their final location."""
        _ensure_dir(self.quotes_dir, "bookQuotes")

        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.quotes_dir, prefix=f".{quotes_ref}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageError("Error writing quotes file.", detail=str(e)) from e

        staged = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(document)
        except OSError as e:
            self.discard(staged)
            raise StorageError("Error writing quotes file.", detail=str(e)) from e

        logger.debug(f"Staged quotes for {quotes_ref} at {staged}")
        return staged

    def publish_quotes(self, staged: Path, quotes_ref: str) -> Path:
        target = self.quotes_path(quotes_ref)
        try:
            os.replace(staged, target)
        except OSError as e:
            raise StorageError("Error writing quotes file.", detail=str(e)) from e

        logger.info(f"Created quotes file: {target}")
        return target

    def discard(self, path: Optional[Path]) -> None:
        if path is None:
            return
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove {path}: {e}")


def _ensure_dir(directory: Path, label: str) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(
            f"Error creating {label} directory.", detail=str(e)
        ) from e
