"""
Structured logging

JSON lines in deployed environments, plain text locally. Loggers carry bound
context (domain, tracking id) that is attached to every record they emit.
"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pythonjsonlogger import jsonlogger

from core.config import settings

JSON_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

HANDLER_NAME = "inventory-console"
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping service identity onto each record"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.update(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            app=settings.app_name,
            environment=settings.environment,
        )


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return CustomJsonFormatter(JSON_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Install the console handler on the root logger, replacing a previous one"""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.set_name(HANDLER_NAME)
    console.setFormatter(build_formatter(log_format or settings.log_format))
    root.addHandler(console)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _bound(context: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in context.items() if value is not None}


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter whose bound context lands in each record's ``extra``"""

    def __init__(self, logger: logging.Logger, extra: Optional[Mapping[str, Any]] = None):
        super().__init__(logger, _bound(extra or {}))

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        # Call-site extra overrides bound context
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs

    def with_context(self, **context) -> "LoggerAdapter":
        """Child adapter with ``context`` bound on top; None values are dropped"""
        return LoggerAdapter(self.logger, {**self.extra, **_bound(context)})


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Logger for ``name`` with ``context`` bound to every record

    Services hold one per instance and bind request data per call:

        logger = get_logger("inventory.internet", domain="d2")
        logger.with_context(tracking_id="abc-123").info("Processing request")
    """
    return LoggerAdapter(logging.getLogger(name), context)


setup_logging()
