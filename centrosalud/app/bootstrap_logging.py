from __future__ import annotations

import contextvars
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from centrosalud.app.common.log_redaction import redact_text, redact_value

_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")
_OPERADOR: contextvars.ContextVar[str] = contextvars.ContextVar("operador", default="-")
_CRASH_KEY = "is_crash"
_APP_LOG = "centrosalud.log"
_CRASH_LOG = "crash.log"


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID.get()
        record.operador = _OPERADOR.get()
        return True


class _CrashFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return bool(getattr(record, _CRASH_KEY, False) or record.levelno >= logging.CRITICAL)


class _StructuredFormatter(logging.Formatter):
    def __init__(self, *, json_mode: bool) -> None:
        super().__init__()
        self._json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_text(record.getMessage()),
            "run_id": getattr(record, "run_id", "-"),
            "operador": getattr(record, "operador", "-"),
        }
        if record.exc_info:
            payload["traceback"] = redact_text(self.formatException(record.exc_info))
        if self._json_mode:
            return json.dumps(payload, ensure_ascii=False)
        return " ".join(f"{key}={value}" for key, value in payload.items())


class ContextLoggerAdapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        merged = {"run_id": _RUN_ID.get(), "operador": _OPERADOR.get(), **extra}
        kwargs["extra"] = redact_value(merged)
        return redact_value(msg), kwargs


def configure_logging(app_name: str, log_dir: Path, level: str = "INFO", json: bool = False) -> None:
    """Consola + fichero rotativo de operación + fichero de caídas (CRITICAL)."""
    log_dir.mkdir(parents=True, exist_ok=True)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = _StructuredFormatter(json_mode=json)
    context_filter = _ContextFilter()

    console = logging.StreamHandler(stream=sys.__stderr__)
    console.setFormatter(formatter)
    console.addFilter(context_filter)

    app_file = RotatingFileHandler(log_dir / _APP_LOG, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    app_file.setFormatter(formatter)
    app_file.addFilter(context_filter)

    crash_file = RotatingFileHandler(log_dir / _CRASH_LOG, maxBytes=500_000, backupCount=2, encoding="utf-8")
    crash_file.setFormatter(formatter)
    crash_file.addFilter(context_filter)
    crash_file.addFilter(_CrashFilter())

    root_logger.addHandler(console)
    root_logger.addHandler(app_file)
    root_logger.addHandler(crash_file)
    logging.captureWarnings(True)
    get_logger(__name__).info("logging_configured app=%s level=%s", app_name, level.upper())


def get_logger(name: str) -> logging.LoggerAdapter:
    return ContextLoggerAdapter(logging.getLogger(name), {})


def set_run_context(run_id: str) -> None:
    _RUN_ID.set(run_id)


def set_operador(medico_id: int | None) -> None:
    """Registra el médico que actúa en las siguientes líneas de log."""
    _OPERADOR.set("-" if medico_id is None else str(medico_id))


def log_crash(logger: logging.LoggerAdapter, exc: BaseException, context: dict[str, Any]) -> None:
    logger.critical(
        "unhandled_exception",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={_CRASH_KEY: True, "context": context},
    )
