# src/batchflow/core/logging.py
"""
Configuração de logging do batchflow (loguru).

O engine registra início/fim de Jobs e Steps, tamanhos de chunk, erros
por item e falhas não fatais do ciclo de vida do writer através do
logger global do loguru. Este módulo apenas instala os sinks.

Limites explícitos:
    - Não é chamado automaticamente pelo engine (a aplicação decide)
    - Não persiste histórico de execução
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from batchflow.core.config.settings import resolve_log_level


def configure_logging(level: str = "INFO", logs_dir: Optional[Path] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

    if logs_dir is not None:
        destination = Path(logs_dir)
        destination.mkdir(parents=True, exist_ok=True)
        logger.add(
            destination / "batchflow.log",
            level=level.upper(),
            rotation="20 MB",
            retention="30 days",
            encoding="utf-8",
        )


def configure_logging_from_config(config: Dict[str, Any], logs_dir: Optional[Path] = None) -> None:
    """Instala os sinks a partir da seção `logging` da configuração resolvida."""
    configure_logging(level=resolve_log_level(config), logs_dir=logs_dir)
