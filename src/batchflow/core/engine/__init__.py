# src/batchflow/core/engine/__init__.py
"""
Engine do batchflow.

Contém o Job, responsável por sequenciar Steps, interromper na primeira
falha, guardar uma StepExecution por Step e reportar o tempo total.

Invariantes:
    - Cada Step é executado no máximo uma vez por `run()`
    - Nenhum Step executa após uma falha
"""

from .job import JobExecution, JobInstance

__all__ = ["JobExecution", "JobInstance"]
