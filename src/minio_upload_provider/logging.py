import logging
import sys

from pythonjsonlogger import jsonlogger

_QUIET_LOGGERS = ["PIL", "urllib3"]


def setup_logging(level: str = "INFO"):
    """
    Configures structured JSON logging for the provider.

    Installs a single stdout handler with a JSON formatter carrying timestamp,
    level, logger name and message on the root logger, replacing any handlers
    already there. Chatty third-party loggers used by the image codec and the
    MinIO HTTP client are capped at WARNING.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in _QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
