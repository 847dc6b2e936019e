from __future__ import annotations

"""Logger naming, handler setup and opt-in tracing for annostrip.

Everything logs below the 'annostrip' logger. The CLI installs a single
stderr handler on it, plain ('LEVEL: message') or JSON depending on
--json-logs / ANNOSTRIP_JSON_LOGS. Per-call traces of the cleaning engine
are DEBUG records emitted only when ANNOSTRIP_TRACE_IO=1.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from annostrip.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "annostrip"
_HANDLER_NAME = "annostrip.stderr"
_PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and ctx.

    `ctx` is only present when the record carries a non-empty `context`
    dict, which is what `trace_io` attaches.
    """

    def __init__(self) -> None:
        super().__init__()
        from annostrip import __version__

        self._version = str(__version__)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(json_logs: bool) -> logging.Formatter:
    return JsonLogFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install (or re-format) the stderr handler of the 'annostrip' logger.

    Calling it again keeps the existing handler but swaps its formatter, so
    switching between plain and JSON output within one process works.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    base.propagate = False

    ours = [h for h in base.handlers if h.get_name() == _HANDLER_NAME]
    if ours:
        for handler in ours:
            handler.setFormatter(_make_formatter(json_logs))
        return base

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_make_formatter(json_logs))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return 'annostrip' or 'annostrip.<name>'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv("ANNOSTRIP_TRACE_IO") == "1"


def trace_io(logger: "LoggerLikeProtocol", message: str, **ctx) -> None:
    """Log *message* at DEBUG with *ctx* attached, when tracing is enabled."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
