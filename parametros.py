"""Parametros globales del proyecto."""

from __future__ import annotations

import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")
FALLBACK_LOG_LEVEL = "WARNING"
INPUT_ENCODING = "utf-8-sig"
CURRENCY_SYMBOL = "$"


def resolve_log_level(raw_level: str | None) -> str:
    """Retorna un nivel de logging valido; niveles desconocidos usan el fallback."""
    level = (raw_level or "").strip().upper()
    return level if level in LOG_LEVELS else FALLBACK_LOG_LEVEL


DEFAULT_LOG_LEVEL = resolve_log_level(os.environ.get("INVENTARIO_LOG_LEVEL"))
