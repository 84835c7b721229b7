"""Logger setup shared by the instaclone modules.

Loggers are quiet (WARNING) unless INSTACLONE_DEBUG is set, in which case
they log at DEBUG and also append to ~/.instaclone_debug.log.
"""
import logging

from . import config


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if config.DEBUG:
        log_file = str(config.DEBUG_LOG_FILE)
        if not any(
            isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == log_file
            for h in logger.handlers
        ):
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setLevel(logging.DEBUG)
                fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
                logger.addHandler(fh)
            except OSError:
                # a missing home directory should not stop the app
                logger.debug("could not open debug log file %s", log_file)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)
    return logger
