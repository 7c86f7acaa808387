# src/batchflow/core/pipeline/__init__.py
"""
# Pipeline Core — batchflow

Estruturas fundamentais compartilhadas por Steps e Job.

## Componentes

- **types**
  - `StepStatus`: estados da execução de um Step
  - `ChunkStatus`: estado transitório do buffer de leitura
  - `RepeatStatus`: retorno de tasklets

- **execution**
  - `StepExecution`: contagens, status e tempos de uma execução

- **chunk**
  - `Chunk`: buffer limitado e ordenado de itens

- **step**
  - `Step` (Protocol): contrato mínimo que todo Step deve satisfazer

## Limites Explícitos

- Não executa Jobs
- Não contém readers/writers de formatos específicos
"""

from .chunk import Chunk
from .execution import StepExecution
from .step import Step
from .types import ChunkStatus, RepeatStatus, StepStatus

__all__ = ["Chunk", "StepExecution", "Step", "ChunkStatus", "RepeatStatus", "StepStatus"]
