import logging

from fastapi import Depends, FastAPI

from post_api.exception_handlers import register_exception_handlers
from post_api.routers import posts
from post_api.security import require_authoring_enabled
from post_api.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Post Authoring API",
    description="Creates blog posts and book-note quotes in the content tree",
)

register_exception_handlers(app)
app.include_router(posts.router, dependencies=[Depends(require_authoring_enabled)])

logger.info(f"Writing posts to {settings.posts_dir} and quotes to {settings.quotes_dir}")


@app.get("/")
async def root():
    return {"message": "Post Authoring API is running"}
