"""
Shared application logger.

Writes to stdout and to ``logs/app.log`` (read back by /api/monitoring/logs)
and counts every record in the Prometheus ``log_messages_total`` metric.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler

from app.config.settings import LOG_DIR, LOG_LEVEL
from app.utils.prometheus_metrics import record_log

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] %(name)s: %(message)s"
LOG_FILE = LOG_DIR / "app.log"


class PrometheusLogHandler(logging.Handler):
    """Counts log records per level."""

    def emit(self, record: logging.LogRecord) -> None:
        record_log(record.levelname)


def _build_logger() -> logging.Logger:
    log = logging.getLogger("app")
    if log.handlers:
        return log

    log.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    log.addHandler(console)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)
    except OSError as e:
        log.warning(f"[Logger] File logging disabled ({LOG_FILE}): {e}")

    log.addHandler(PrometheusLogHandler())
    log.propagate = False
    return log


logger = _build_logger()
