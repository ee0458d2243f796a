"""Entry point for the lue-lue backend."""
import logging

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from lue_lue.config import get_settings  # noqa: E402

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("lue_lue.main:app", host=settings.HOST, port=settings.PORT)
