"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once from the program entry point
(see `localshortener.cli.main`) before any other logging is done. Library
code only creates module loggers and never configures handlers itself.

Logging format (one JSON object per line, written to stderr):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "localshortener.dao.file.short_url_file_dao",
    "message": "Loaded snapshot.",
    "dataFile": "url_data.json",
    "totalUrls": 3
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from localshortener.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {'asctime', 'message', 'taskName'}

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str, ensure_ascii=False)


def initialize_logging(level: str | None = None) -> None:
    """Install the JSON formatter on the root logger

    Args:
        level (str | None):
            Log level name. Falls back to `LOG_LEVEL`, then 'WARNING'.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'WARNING')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr'],
            },
        }
    )
