"""
Logging utilities for the AE Commission Calculator
Location: commission_app/utils/logging_utils.py
"""

import os
import json
import logging
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_level: str = 'INFO', log_file: Optional[str] = None, json_format: bool = False):
    """
    Setup application logging with the specified configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, logs to console only.
        json_format: Emit one JSON object per record instead of plain text.
    """
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode='a')
    else:
        handler = logging.StreamHandler()

    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler])

    return logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging
    """
    def format(self, record):
        log_record = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno
        }

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_record)
