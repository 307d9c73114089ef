"""
Logging setup for the scheduler
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional

from config import LOGGING_CONFIG


def setup_logging(config: Optional[Dict] = None) -> logging.Logger:
    """Configure the root logger from LOGGING_CONFIG"""
    config = config or LOGGING_CONFIG

    formatter = logging.Formatter(config['format'])

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config['level'].upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.get('file_path'):
        file_handler = RotatingFileHandler(
            config['file_path'],
            maxBytes=config['max_file_size'],
            backupCount=config['backup_count'],
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Flask's request log is noisy at INFO
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    return root_logger
