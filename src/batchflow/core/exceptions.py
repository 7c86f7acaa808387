"""
batchflow — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do batchflow.

Objetivo:
- Permitir que colaboradores (Reader/Processor/Writer) e Steps levantem
  exceções semânticas tipadas, uma por fase do loop de chunks
- Facilitar o mapeamento determinístico para BatchErrorPayload
- Permitir que o Job identifique o Step que falhou (StepFailure)

Regras:
- Não contém lógica de formato (CSV, JSON, banco de dados, ...).
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class BatchException(Exception):
    """Base class para exceções internas do batchflow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - Igualdade é por identidade (exceções continuam hasheáveis)
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Item Contract (erros por item, contabilizados pela política de skip)
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ItemReaderError(BatchException):
    """Falha ao ler um item da fonte."""


@dataclass(eq=False)
class ItemProcessorError(BatchException):
    """Falha ao transformar um item."""


@dataclass(eq=False)
class ItemWriterError(BatchException):
    """Falha ao persistir (write/flush) um lote de itens."""


# ---------------------------------------------------------------------------
# Steps / Job
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class TaskletError(BatchException):
    """Falha reportada pela operação encapsulada por um TaskletStep."""


@dataclass(eq=False)
class StepConfigurationError(BatchException):
    """Parâmetros de construção de Step inválidos (chunk_size, skip_limit, name)."""


@dataclass(eq=False)
class StepFailure(BatchException):
    """Um Step do Job terminou em falha; o Job foi interrompido.

    `step_name` identifica o Step que falhou. A exceção original do Step
    fica disponível em `__cause__`.
    """

    step_name: str = ""
