import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from post_api.errors import MalformedInputError, PostCreationError
from post_api.schemas.post import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON data received."
INVALID_PAYLOAD_MESSAGE = "Invalid post data received."


def error_response(error: PostCreationError) -> JSONResponse:
    body = ErrorResponse(message=error.message, errorDetail=error.detail or None)
    return JSONResponse(
        status_code=error.status_code, content=body.model_dump(exclude_none=True)
    )


async def post_creation_error_handler(request: Request, exc: PostCreationError):
    return error_response(exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = INVALID_JSON_MESSAGE
    else:
        message = INVALID_PAYLOAD_MESSAGE

    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in errors
    )
    logger.warning(f"Rejected request to {request.url.path}: {detail}")
    return error_response(MalformedInputError(message, detail=detail))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostCreationError, post_creation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
