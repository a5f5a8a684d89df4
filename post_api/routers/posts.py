import logging

from fastapi import APIRouter, Depends

from post_api import dependencies as deps
from post_api.errors import PostCreationError, StorageError
from post_api.schemas.post import CreatePostResponse, ErrorResponse, PostRequest
from post_api.services.post_creation_service import PostCreationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post(
    "/create-post",
    status_code=201,
    response_model=CreatePostResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_post(
    payload: PostRequest,
    service: PostCreationService = Depends(deps.get_post_creation_service),
):
    """Create a new post (and its quotes file for book notes)."""
    try:
        return service.create_post(payload)
    except PostCreationError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}", exc_info=True)
        raise StorageError("Error creating post.", detail=str(e))
