# File: colorcore/logging_setup.py
from __future__ import annotations

import logging
import logging.handlers
import queue
import sys
import threading
from dataclasses import dataclass
from pathlib import Path

from colorcore.io.json_store import ensure_dir
from colorcore.logging_context import action_var, corr_id_var, widget_var

LOG_FORMAT = (
    "%(asctime)s %(levelname)s "
    "%(name)s:%(funcName)s:%(lineno)d "
    "corr=%(corr_id)s widget=%(widget)s action=%(action)s - %(message)s"
)


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # 注入上下文字段；extra= 显式传入的值优先
        if not hasattr(record, "corr_id"):
            record.corr_id = corr_id_var.get()
        if not hasattr(record, "widget"):
            record.widget = widget_var.get()
        if not hasattr(record, "action"):
            record.action = action_var.get()
        return True


@dataclass
class LoggingRuntime:
    listener: logging.handlers.QueueListener

    def stop(self) -> None:
        self.listener.stop()


def setup_logging(
    *,
    app_data_dir: Path,
    level: str = "INFO",
    keep_days: int = 14,
    console: bool = False,
) -> LoggingRuntime:
    """
    root logger 只挂 QueueHandler；真正写文件/stderr 的 handler 在
    QueueListener 线程里执行。
    - logs/app.log   : INFO 及以上，按天轮转
    - logs/error.log : ERROR 及以上
    """
    logs_dir = app_data_dir / "logs"
    ensure_dir(logs_dir)

    log_q: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=10_000)
    formatter = logging.Formatter(fmt=LOG_FORMAT)

    app_fh = logging.handlers.TimedRotatingFileHandler(
        filename=str(logs_dir / "app.log"),
        when="midnight",
        backupCount=int(keep_days),
        encoding="utf-8",
    )
    app_fh.setLevel(logging.INFO)

    err_fh = logging.handlers.TimedRotatingFileHandler(
        filename=str(logs_dir / "error.log"),
        when="midnight",
        backupCount=int(keep_days),
        encoding="utf-8",
    )
    err_fh.setLevel(logging.ERROR)

    handlers: list[logging.Handler] = [app_fh, err_fh]
    if console:
        ch = logging.StreamHandler(stream=sys.stderr)
        ch.setLevel(logging.DEBUG)
        handlers.append(ch)

    for h in handlers:
        h.setFormatter(formatter)
        h.addFilter(ContextFilter())

    # QueueHandler 在调用线程里捕获 contextvars
    qh = logging.handlers.QueueHandler(log_q)
    qh.setLevel(logging.DEBUG)
    qh.addFilter(ContextFilter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(qh)

    listener = logging.handlers.QueueListener(log_q, *handlers, respect_handler_level=True)
    listener.start()

    _install_global_exception_hooks()

    logging.getLogger(__name__).info("logging initialized", extra={"action": "boot"})
    return LoggingRuntime(listener=listener)


def _install_global_exception_hooks() -> None:
    log = logging.getLogger("unhandled")

    def excepthook(exc_type, exc, tb):
        log.critical("unhandled exception (main thread)", exc_info=(exc_type, exc, tb))

    def th_excepthook(args: threading.ExceptHookArgs):
        log.critical(
            "unhandled exception (thread)",
            extra={"action": "thread_excepthook"},
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = excepthook
    threading.excepthook = th_excepthook
