"""
Logging configuration for Cloud Run and local environments.

Cloud Run (K_SERVICE set) logs through google-cloud-logging; everywhere else
log records are written to stdout as JSON lines.
"""

import json
import logging
import os
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """
    Custom JSON log formatter.

    Keeps local development logs structured the same way Google Cloud
    Logging shows them, one JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Fields passed as `extra={"extra_fields": {...}}` are merged into the
        top-level object; exception tracebacks go under "exception".

        Args:
            record: The log record to format.

        Returns:
            A JSON string representing the log record.
        """
        log_object = {
            "timestamp": datetime.now(UTC).isoformat(),
            "severity": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_object.update(record.extra_fields)

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


def setup_global_logging(level: int = logging.INFO) -> None:
    """
    Configure global logging based on environment.

    When running in Cloud Run (K_SERVICE env var is set):
    - Uses google-cloud-logging for structured logs with trace correlation.
    - Falls back to basicConfig if the client cannot be created.

    When running locally or in tests:
    - Installs a single stdout handler using JsonFormatter.

    Args:
        level: Root log level (INFO unless overridden)
    """
    is_cloud_run = os.getenv("K_SERVICE") is not None

    if is_cloud_run:
        try:
            import google.cloud.logging

            client = google.cloud.logging.Client()
            client.setup_logging(log_level=level)
            logging.info("Cloud Logging initialized for Cloud Run.")
        except Exception as e:
            logging.basicConfig(
                level=level,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
            logging.warning(f"Cloud Logging setup failed, using basic config: {e}")
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    # Replace rather than stack handlers when called more than once
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
