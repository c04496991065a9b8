import logging
import inspect
from passgen.core.config import get_settings

# Third-party loggers that are chatty at DEBUG while parsing form bodies.
_QUIET_LOGGERS = ("multipart", "python_multipart")


def configure_logging():
    settings = get_settings()
    name = settings.LOG_LEVEL.upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger named for the caller module when `name` is None.

    Handlers call `get_logger()` at import time so their events carry the
    module path (`passgen.api.generate`).
    """
    if name:
        return logging.getLogger(name)

    frame = inspect.stack()[1]
    module = inspect.getmodule(frame[0])
    mod_name = module.__name__ if module else "passgen"
    return logging.getLogger(mod_name)
