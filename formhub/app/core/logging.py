"""File logger shared by the routers and services.

The `formhub` logger writes to `{LOG_PATH}/{LOG_FILE}`; modules get child
loggers that hand their records up to it.
"""
import os
from logging import FileHandler, Formatter, getLogger, INFO
from formhub.app.core.config import settings

ROOT_LOGGER = "formhub"


def get_logs_writer_logger(name=ROOT_LOGGER, logging_dir=None, filename=None):
    root = getLogger(ROOT_LOGGER)

    if not root.handlers:
        logging_dir = logging_dir or settings.LOG_PATH
        os.makedirs(logging_dir, exist_ok=True)
        log_path = os.path.join(logging_dir, filename or settings.LOG_FILE)

        root.setLevel(INFO)
        root.propagate = False

        handler = FileHandler(log_path, mode="a", encoding="utf-8", delay=True)
        handler.setFormatter(Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)

    return getLogger(name)
