from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Optional

# Context variables for structured logging
run_id_var: ContextVar[str] = ContextVar("run_id", default="-")
command_var: ContextVar[str] = ContextVar("command", default="-")


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = run_id_var.get()
        record.command = command_var.get()
        return True


class SimpleStructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(UTC).replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
        msg = record.getMessage()
        return (
            f"{ts} level={record.levelname} logger={record.name} "
            f"run_id={getattr(record, 'run_id', '-')} command={getattr(record, 'command', '-')} "
            f"msg={msg}"
        )


def setup_logging(level: str = "WARNING") -> None:
    lvl = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(lvl)

    # Replace handlers (repeated CLI invocations in one process, e.g. tests)
    root.handlers = []

    # stderr keeps logs out of the result text on stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(lvl)
    handler.addFilter(ContextFilter())
    handler.setFormatter(SimpleStructuredFormatter())

    root.addHandler(handler)


def set_log_context(*, run_id: str, command: Optional[str] = None) -> None:
    run_id_var.set(run_id)
    if command is not None:
        command_var.set(command)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
