import json
import logging
from datetime import datetime, timezone
from typing import IO, Optional

from packshot_compositor.app.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; the compositor's `ctx` extra is nested as-is."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        ctx = getattr(record, "ctx", None)
        if isinstance(ctx, dict):
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # mode dumps and paths are not always JSON-native
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", *, stream: Optional[IO[str]] = None) -> None:
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"COMPOSITOR_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    h = logging.StreamHandler(stream)
    h.setFormatter(JsonFormatter())
    root.addHandler(h)
