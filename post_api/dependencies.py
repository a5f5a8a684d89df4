from fastapi import Depends

from post_api.repos.content_repo import FileContentRepo
from post_api.security import get_settings
from post_api.services.post_creation_service import PostCreationService


def get_content_repo(current_settings=Depends(get_settings)):
    return FileContentRepo(
        posts_dir=current_settings.posts_dir,
        quotes_dir=current_settings.quotes_dir,
    )


def get_post_creation_service(
    repo=Depends(get_content_repo),
    current_settings=Depends(get_settings),
):
    return PostCreationService(repo=repo, settings=current_settings)
