# tixhub/core/logging.py
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional, Union


class JsonFormatter(logging.Formatter):
    """Une ligne JSON par record : ts, niveau, logger, message (+ trace)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """
    Installe le formatter JSON sur le root logger.
    - `level` accepte un entier ou un nom ("debug", "INFO"...) ; nom inconnu → INFO.
    - sortie sur stderr par défaut : stdout reste réservé à la liste d'événements.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
