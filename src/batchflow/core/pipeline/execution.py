# src/batchflow/core/pipeline/execution.py
"""
Registro mutável da execução de um Step (StepExecution).

A StepExecution é criada pelo Job quando um Step começa, pertence
exclusivamente ao Step durante toda a sua execução e, ao final (com
sucesso ou não), o Job guarda uma cópia somente leitura (`snapshot`)
no seu mapa nome → execução.

Contadores:
    - read_count: itens lidos com sucesso
    - process_count: itens processados com sucesso
    - write_count: itens escritos com sucesso (write + flush)
    - read_error_count / process_error_count / write_error_count:
      erros por fase, somados pela política de skip

Limites explícitos:
    - Não executa Steps
    - Não persiste histórico entre execuções do processo
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .types import StepStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class StepExecution:
    """
    Contagens, status e tempos de uma execução de Step.

    Campos de diagnóstico:
        - warnings: falhas não fatais (ex.: `writer.open()`/`close()`)
        - error: payload serializável do erro que encerrou o Step, se houver
    """

    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: StepStatus = StepStatus.STARTING
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[timedelta] = None

    read_count: int = 0
    write_count: int = 0
    process_count: int = 0
    read_error_count: int = 0
    process_error_count: int = 0
    write_error_count: int = 0

    warnings: List[str] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None

    @property
    def error_count(self) -> int:
        return self.read_error_count + self.process_error_count + self.write_error_count

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def mark_started(self) -> None:
        self.start_time = _utcnow()

    def mark_finished(self) -> None:
        self.end_time = _utcnow()
        if self.start_time is None:
            self.start_time = self.end_time
        self.duration = self.end_time - self.start_time

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def snapshot(self) -> "StepExecution":
        """Cópia profunda e independente, usada pelo Job para inspeção posterior."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration_seconds": self.duration.total_seconds() if self.duration is not None else None,
            "read_count": self.read_count,
            "write_count": self.write_count,
            "process_count": self.process_count,
            "read_error_count": self.read_error_count,
            "process_error_count": self.process_error_count,
            "write_error_count": self.write_error_count,
            "warnings": list(self.warnings),
            "error": copy.deepcopy(self.error),
        }
