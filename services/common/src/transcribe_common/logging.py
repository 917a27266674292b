import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    This function initializes a JSON formatter that includes timestamp, level,
    logger name, message, trace_id, and span_id. It replaces the handlers the
    Lambda runtime installs on the root logger with a custom stream handler
    so every record is emitted as one JSON line, and turns down the AWS SDK
    loggers which are chatty at INFO level.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["boto3", "botocore", "urllib3"]:
        sdk_logger = logging.getLogger(logger_name)
        sdk_logger.setLevel(logging.WARNING)

    return root_logger
