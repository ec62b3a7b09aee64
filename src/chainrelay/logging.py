import json
import logging
import os
import sys

_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord(None, None, None, None, '', (), None).__dict__.keys()
) | {"message", "asctime"}


class RelayJSONFormatter(logging.Formatter):
    """One JSON object per line.

    ``correlation_id`` sits at the top level so a request can be followed
    across lines; every other ``extra=`` field is grouped under ``context``.
    """

    def format(self, record):
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and key != "correlation_id"
        }
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": getattr(record, "correlation_id", None),
            "message": record.getMessage(),
        }
        if context:
            log_record["context"] = context
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def setup_logging():
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger("chainrelay")
    logger.setLevel(log_level)

    if any(isinstance(h.formatter, RelayJSONFormatter) for h in logger.handlers):
        return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(RelayJSONFormatter())
    logger.addHandler(console_handler)
