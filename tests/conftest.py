import pytest

from post_api.errors import ConflictError, StorageError
from post_api.repos.content_repo import FileContentRepo
from post_api.settings import Settings


@pytest.fixture
def content_settings(tmp_path):
    """Settings pointing both content areas at a temporary content root."""
    return Settings(CONTENT_ROOT=str(tmp_path), APP_ENV="development")


@pytest.fixture
def content_repo(content_settings):
    return FileContentRepo(
        posts_dir=content_settings.posts_dir,
        quotes_dir=content_settings.quotes_dir,
    )


class FakeRepo:
    """
    In-memory stand-in for FileContentRepo.
    Set fail_on to "stage", "create" or "publish" to make that step raise.
    """

    def __init__(self, existing=None, fail_on=None):
        self.posts = dict(existing or {})
        self.staged = {}
        self.quotes = {}
        self.discarded = []
        self.fail_on = fail_on
        self.calls = []

    def post_exists(self, filename):
        self.calls.append(("post_exists", filename))
        return filename in self.posts

    def stage_quotes(self, quotes_ref, document):
        self.calls.append(("stage_quotes", quotes_ref))
        if self.fail_on == "stage":
            raise StorageError("Error writing quotes file.", detail="disk full")
        staged = f".{quotes_ref}.tmp"
        self.staged[staged] = document
        return staged

    def create_post(self, filename, content):
        self.calls.append(("create_post", filename))
        if self.fail_on == "create":
            raise StorageError("Error writing post file.", detail="read-only")
        if self.fail_on == "race" or filename in self.posts:
            raise ConflictError.for_filename(filename)
        self.posts[filename] = content
        return filename

    def publish_quotes(self, staged, quotes_ref):
        self.calls.append(("publish_quotes", quotes_ref))
        if self.fail_on == "publish":
            raise StorageError("Error writing quotes file.", detail="rename failed")
        self.quotes[f"{quotes_ref}.yaml"] = self.staged.pop(staged)
        return f"{quotes_ref}.yaml"

    def discard(self, path):
        if path is None:
            return
        self.discarded.append(path)
        self.staged.pop(path, None)
        self.posts.pop(path, None)


class FakePostCreationService:
    """
    Minimal post creation service stand-in for router tests.
    """

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.payloads = []

    def create_post(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.result
