from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Callable

from centrosalud.app.bootstrap_logging import log_crash

ExceptHook = Callable[[type[BaseException], BaseException, TracebackType | None], None]


def install_global_exception_hook(logger: logging.LoggerAdapter) -> None:
    sys.excepthook = fatal_exception_handler(logger)


def fatal_exception_handler(logger: logging.LoggerAdapter) -> ExceptHook:
    def _handler(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        log_crash(logger, exc_value.with_traceback(exc_traceback), {"origen": "excepthook"})

    return _handler
