import logging
import uvicorn

from subbox.config import settings

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run("subbox.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
