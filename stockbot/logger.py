import logging
import json
from logging.handlers import RotatingFileHandler

from .config import LOG_FILE

def setup_logger(log_file: str = LOG_FILE):
    """
    Sets up a logger to output structured JSON logs to a rotating file.
    """
    logger = logging.getLogger("stock_bot")
    logger.setLevel(logging.INFO)
    logger.propagate = False  # Prevent logs from being duplicated by the root logger

    # 10MB per file, 5 backups
    handler = RotatingFileHandler(log_file, maxBytes=10485760, backupCount=5)

    class JsonFormatter(logging.Formatter):
        def format(self, record):
            log_object = {
                "timestamp": self.formatTime(record, self.datefmt),
                "level": record.levelname,
            }
            # Dict messages are merged into the log object
            if isinstance(record.msg, dict):
                log_object.update(record.msg)
            else:
                log_object["message"] = record.getMessage()

            return json.dumps(log_object)

    handler.setFormatter(JsonFormatter())

    # Avoid adding handlers multiple times
    if not logger.handlers:
        logger.addHandler(handler)

    return logger

# Initialize and export the logger
bot_logger = setup_logger()
