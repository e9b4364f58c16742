"""Run the standalone FastAPI server."""

import uvicorn

from itombs.api.main import app
from itombs.config import settings
from itombs.logger import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info("Starting FastAPI on http://localhost:%s", settings.server.api_port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.api_port)
