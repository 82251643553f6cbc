"""Application-wide logging initialization

Call `initialize_logging()` from a Lambda handler package's `__init__.py`,
before anything logs. Every record is written to stdout as one JSON document,
which CloudWatch indexes field by field:

{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "shareup.lambdas.shorten_url.app",
    "message": "Short URL created. Responding with 200.",
    "event": "SHORT_URL_CREATED",
    "short_url": "https://share-up.example.com/V1StGX"
}

Anything passed through `extra=` becomes a top-level field. By convention
handlers pass an `event` code (see lambdas/*/constants.py).
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shareup.constants import ENV


# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

# Chatty third-party loggers kept at WARNING regardless of LOG_LEVEL
_QUIET_LOGGERS = ('botocore', 'boto3', 'urllib3')


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, its `extra` fields and any traceback as JSON"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        log = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in _RESERVED_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # datetimes, exceptions and other non-JSON extras are stringified
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in _QUIET_LOGGERS},
            'root': {
                'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )
