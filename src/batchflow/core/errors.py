"""
batchflow — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do batchflow.
O payload é gravado na StepExecution do Step que falhou, permitindo
inspeção posterior sem depender de stack traces.

Payloads devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import BatchException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BatchErrorPayload:
    """
    Payload canônico de erro do batchflow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Fases do loop de chunks
READ_ERROR = "READ_ERROR"
PROCESSOR_ERROR = "PROCESSOR_ERROR"
WRITE_ERROR = "WRITE_ERROR"

# Steps / Job
TASKLET_ERROR = "TASKLET_ERROR"


_DEFAULT_HINTS = {
    READ_ERROR: "Verifique a fonte de dados ou aumente o skip_limit do Step.",
    PROCESSOR_ERROR: "Verifique o processor e os itens rejeitados ou aumente o skip_limit do Step.",
    WRITE_ERROR: "Verifique o destino de escrita ou aumente o skip_limit do Step.",
    TASKLET_ERROR: "Verifique a operação encapsulada pelo tasklet.",
}


def exception_to_payload(exc: BaseException, code: str) -> BatchErrorPayload:
    """Converte uma exceção em BatchErrorPayload (serializável, acionável).

    Regras:
    - BatchException: já vem com message/details/hint.
    - Outras exceções: encapsular sem expor stack trace, apenas a classe.
    """
    if isinstance(exc, BatchException):
        return BatchErrorPayload(
            type=code,
            message=exc.message or "Erro de execução",
            details=dict(exc.details or {}),
            hint=exc.hint or _DEFAULT_HINTS.get(code),
        )

    return BatchErrorPayload(
        type=code,
        message=str(exc) or "Erro inesperado durante execução",
        details={"exception_class": exc.__class__.__name__},
        hint=_DEFAULT_HINTS.get(code),
    )
