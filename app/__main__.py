import logging

import uvicorn

from app.main import app

logger = logging.getLogger(__name__)


def main():
    settings = app.state.settings
    logger.info(f"🚀 Server starting on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
