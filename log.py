import logging
import os
from logging import handlers

import config


def configure_logger(path):
    """
    Return a logger named after the script at path, logging to the console
    and, when config.LOG_DIR is set, to a rotating <name>.log file there
    """
    full_path = os.path.abspath(path)
    filename = os.path.basename(full_path)
    name = os.path.splitext(filename)[0]
    log_filename: str = f"{name}.log"

    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.LOG_LEVEL)
        console_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(console_handler)

        if config.LOG_DIR:
            os.makedirs(config.LOG_DIR, exist_ok=True)
            logfile_handler = handlers.RotatingFileHandler(
                    os.path.join(config.LOG_DIR, log_filename),
                    maxBytes=5 * 1024 * 1024,
                    backupCount=10
            )
            logfile_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
            logger.addHandler(logfile_handler)

    return logger
