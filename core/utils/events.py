"""Structured JSON log events."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger("lsupport.support")


def log_event(level: int, event: str, **fields: Any) -> None:
    """Emit one compact JSON record on the support logger."""

    payload = {"event": event, **fields}
    logger.log(level, _dump_json(payload))


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
