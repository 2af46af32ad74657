# unimatch/utils/logger.py

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# loggers that share our stdout handler
_ROUTED_LOGGERS = ("unimatch", "uvicorn", "uvicorn.error", "uvicorn.access")

_handler = None


def init_logger(level: str = "INFO") -> logging.Handler:
    """
    Send root, unimatch and Uvicorn logs to a single stdout handler.

    Safe to call more than once (app import, uvicorn reload, tests): the
    handler is created on the first call and later calls only change the
    level. Unknown level names fall back to INFO.
    """
    global _handler
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    _handler.setLevel(log_level)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [_handler]

    for name in _ROUTED_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [_handler]
        logger.setLevel(log_level)
        # root already holds the handler
        logger.propagate = False

    # requests logs every connection at DEBUG through urllib3
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))
    return _handler
