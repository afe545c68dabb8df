"""
Run the API with uvicorn: ``python -m exercise_tracker``.
"""
import logging
import uvicorn
from exercise_tracker.core.config import settings
from exercise_tracker.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main():
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Your app is listening on port {settings.PORT}")
    uvicorn.run("exercise_tracker.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
