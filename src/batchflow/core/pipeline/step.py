# src/batchflow/core/pipeline/step.py
"""
Contrato canônico de Step do batchflow.

Um Step é uma fase independente de um Job. Existem duas formas
concretas (ver `batchflow.steps`):
    - ChunkOrientedStep: loop iterativo leitura → processamento → escrita
    - TaskletStep: operação única e opaca

Princípios fundamentais:
    - Steps não conhecem o Job nem os demais Steps
    - O Step é o único dono da StepExecution durante `execute`
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - `execute` retorna `None` em caso de sucesso
    - Em caso de falha, o status terminal já está gravado na StepExecution
      e a exceção que causou a falha é propagada
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .execution import StepExecution


@runtime_checkable
class Step(Protocol):
    """
    Contrato mínimo que todo Step deve satisfazer para ser executado por um Job.

    Atributos obrigatórios:
        - name: nome do Step; chave da StepExecution no Job

    Limites explícitos:
        - Não define políticas de execução do Job (parada na primeira falha)
        - Não retém a StepExecution após o término
    """
    name: str

    def execute(self, step_execution: StepExecution) -> None:
        """Executa o Step, mutando exclusivamente a StepExecution recebida."""
        ...
