import logging

import uvicorn

from post_api.main import app
from post_api.settings import settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Starting post authoring API on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
