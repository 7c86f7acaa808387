# src/batchflow/core/item/logger.py
"""Writer que apenas registra cada item no log (útil para depuração de Jobs)."""

from __future__ import annotations

from typing import Any, Sequence

from loguru import logger

from .contract import BaseItemWriter


class LoggerWriter(BaseItemWriter):
    def __init__(self, level: str = "INFO"):
        self.level = level.upper()

    def write(self, items: Sequence[Any]) -> None:
        for item in items:
            logger.log(self.level, "Record: {!r}", item)
