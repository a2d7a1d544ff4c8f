from __future__ import annotations

import logging
import logging.config
import os
import sys
import uuid
from contextvars import ContextVar

# Correlaciona as linhas de log de uma mesma execução da CLI
_command_id_ctx: ContextVar[str | None] = ContextVar("command_id", default=None)

_FORMATO = "%(asctime)s | %(levelname)s | %(name)s | cmd=%(command_id)s | %(message)s"


class CommandIdFilter(logging.Filter):
    """Adds the current command id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.command_id = _command_id_ctx.get() or "-"
        return True


def set_command_id(value: str | None) -> None:
    _command_id_ctx.set(value)


def generate_command_id() -> str:
    return uuid.uuid4().hex[:12]


def configure_logging(level: str | None = None) -> None:
    """Send logs to stderr so stdout carries only the command result.

    `level` (from the CLI) wins over LOG_LEVEL; SQL statements follow LOG_LEVEL_SQL.
    """
    nivel = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"command_id": {"()": CommandIdFilter}},
            "formatters": {"cli": {"format": _FORMATO, "datefmt": "%Y-%m-%dT%H:%M:%S%z"}},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stderr,
                    "formatter": "cli",
                    "filters": ["command_id"],
                }
            },
            "root": {"level": "WARNING", "handlers": ["stderr"]},
            "loggers": {
                "sqlalchemy.engine": {"level": os.getenv("LOG_LEVEL_SQL", "WARNING").upper()},
                "minhas_financas": {"level": nivel, "handlers": ["stderr"], "propagate": False},
            },
        }
    )


logger = logging.getLogger("minhas_financas")
