# src/batchflow/core/pipeline/types.py
"""
Tipos canônicos de status do batchflow.

Este módulo define os enums que padronizam o estado de execução de
Steps, o estado transitório de um chunk durante a leitura e o retorno
de tasklets.

Componentes principais:
    - StepStatus   → estado persistido na StepExecution
    - ChunkStatus  → estado transitório do buffer de leitura (nunca persistido)
    - RepeatStatus → retorno de um Tasklet

Invariantes:
    - Enums possuem valores textuais canônicos (serializáveis)
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from enum import Enum


class StepStatus(str, Enum):
    """
    Estados de execução de um Step.

    Estados definidos:
        - STARTING: valor inicial, antes de qualquer leitura
        - STARTED: loop de chunks (ou tasklet) em andamento
        - SUCCESS: fim dos dados alcançado e último lote tratado
        - READ_ERROR: skip_limit excedido na fase de leitura
        - PROCESSOR_ERROR: skip_limit excedido na fase de processamento
        - WRITE_ERROR: skip_limit excedido na fase de escrita
        - FAILED: a operação de um TaskletStep falhou

    Invariantes:
        - STARTING é sempre o valor inicial
        - Exatamente um estado terminal encerra a execução
    """
    STARTING = "starting"
    STARTED = "started"
    SUCCESS = "success"
    READ_ERROR = "read_error"
    PROCESSOR_ERROR = "processor_error"
    WRITE_ERROR = "write_error"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self not in (StepStatus.STARTING, StepStatus.STARTED)

    @property
    def is_failure(self) -> bool:
        return self.is_terminal and self is not StepStatus.SUCCESS


class ChunkStatus(str, Enum):
    """
    Estado transitório do buffer de leitura.

    Determina apenas se a leitura continua e se o Step segue para
    processamento/escrita. Nunca é persistido.
    """
    CONTINUABLE = "continuable"
    FULL = "full"
    FINISHED = "finished"
    ERROR = "error"


class RepeatStatus(str, Enum):
    """Retorno de um Tasklet: ainda há trabalho (CONTINUABLE) ou terminou (FINISHED)."""
    CONTINUABLE = "continuable"
    FINISHED = "finished"
