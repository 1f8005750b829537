"""Observability: structured logs for filter passes (predicate, scanned, matched, latency_ms)."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("specfilter.filter")


def get_logger() -> logging.Logger:
    return _LOGGER


def log_filter_pass(
    predicate: str,
    scanned: int,
    matched: int,
    latency_ms: float,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured debug record describing a completed filter pass."""
    payload: dict[str, Any] = {
        "predicate": predicate,
        "scanned": scanned,
        "matched": matched,
        "latency_ms": round(latency_ms, 2),
    }
    if extra:
        payload.update(extra)
    _LOGGER.debug("filter_pass", extra=payload)
