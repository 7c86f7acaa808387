# src/batchflow/core/engine/job.py
"""
Job do batchflow: sequência ordenada de Steps.

Política de execução:
    - Steps são executados na ordem de declaração, um por vez
    - Cada Step recebe uma StepExecution nova, chaveada pelo nome do Step
    - Uma cópia da StepExecution é guardada incondicionalmente ao final
      do Step (sucesso ou falha), permitindo inspeção de contagens parciais
    - A primeira falha interrompe o Job: Steps seguintes não executam e
      `run()` levanta `StepFailure` com o nome do Step que falhou

Limites explícitos:
    - Sem execução paralela de Steps
    - Sem persistência de histórico entre execuções do processo
    - Sem retry
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from loguru import logger

from batchflow.core.config.settings import validate_step_name
from batchflow.core.exceptions import StepConfigurationError, StepFailure
from batchflow.core.pipeline.execution import StepExecution
from batchflow.core.pipeline.step import Step


def build_name(length: int = 8) -> str:
    """Nome aleatório alfanumérico para Jobs sem nome explícito."""
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


@dataclass(frozen=True)
class JobExecution:
    """Resultado de uma execução bem-sucedida de Job."""

    job_id: str
    job_name: str
    start: datetime
    end: datetime
    duration: timedelta


class JobInstance:
    """Job canônico do batchflow."""

    def __init__(self, steps: Iterable[Step], *, name: Optional[str] = None):
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise StepConfigurationError(
                message="O nome do Job deve ser uma string não vazia",
                details={"name": repr(name)},
            )
        steps = list(steps)
        for step in steps:
            validate_step_name(getattr(step, "name", None))

        self.id: str = str(uuid4())
        self.name: str = name or build_name()
        self.steps: List[Step] = steps
        self._step_executions: Dict[str, StepExecution] = {}

    def __repr__(self) -> str:
        return f"JobInstance(name={self.name!r}, steps={[s.name for s in self.steps]!r})"

    @property
    def step_executions(self) -> Dict[str, StepExecution]:
        return {name: execution.snapshot() for name, execution in self._step_executions.items()}

    def get_step_execution(self, name: str) -> Optional[StepExecution]:
        execution = self._step_executions.get(name)
        return execution.snapshot() if execution is not None else None

    def run(self) -> JobExecution:
        start = datetime.now(timezone.utc)
        self._step_executions = {}
        logger.info("Start of job: {}, id: {}", self.name, self.id)

        for step in self.steps:
            step_execution = StepExecution(name=step.name)
            try:
                step.execute(step_execution)
            except Exception as exc:
                self._step_executions[step.name] = step_execution.snapshot()
                logger.error("Job {} stopped: step {} failed ({})", self.name, step.name, exc)
                raise StepFailure(
                    message=f"Step falhou: {step.name}",
                    details={
                        "job": self.name,
                        "step": step.name,
                        "status": step_execution.status.value,
                        "exception_class": exc.__class__.__name__,
                    },
                    step_name=step.name,
                ) from exc

            self._step_executions[step.name] = step_execution.snapshot()

        end = datetime.now(timezone.utc)
        logger.info("End of job: {}, id: {}", self.name, self.id)

        return JobExecution(
            job_id=self.id,
            job_name=self.name,
            start=start,
            end=end,
            duration=end - start,
        )
