# passgen/main.py
from dotenv import load_dotenv

# ------------------------------------------------------------------
# Load .env FIRST (settings read the environment at import time)
# ------------------------------------------------------------------
load_dotenv()

# ------------------------------------------------------------------
# Imports AFTER env is loaded
# ------------------------------------------------------------------
from fastapi import FastAPI
from passgen import __version__
from passgen.core.config import get_settings
from passgen.core.logging import configure_logging, get_logger
from passgen.api.router import router as page_router

# ------------------------------------------------------------------
# Init
# ------------------------------------------------------------------
configure_logging()
settings = get_settings()
_logger = get_logger(__name__)

_logger.info(
    f"{settings.APP_NAME} starting: secure_random={settings.SECURE_RANDOM} templates={settings.template_path}"
)

# ------------------------------------------------------------------
# FastAPI app
# ------------------------------------------------------------------
# Only the form page is served; the generated API docs stay off.
app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
app.include_router(page_router)


def run():
    import uvicorn
    uvicorn.run("passgen.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
