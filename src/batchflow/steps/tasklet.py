# src/batchflow/steps/tasklet.py
"""
Tasklet Step — variante degenerada de Step que encapsula uma única operação.

Exemplos de tasklet: enviar um arquivo, compactar um diretório, limpar
uma tabela temporária. A operação é invocada exatamente uma vez; ela é
dona de qualquer repetição interna e informa apenas se terminou
(`RepeatStatus.FINISHED`) ou se deixou trabalho pendente
(`RepeatStatus.CONTINUABLE`). Ambos os retornos encerram o Step com
SUCCESS; qualquer exceção encerra com FAILED.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger

from batchflow.core.config.settings import validate_step_name
from batchflow.core.errors import TASKLET_ERROR, exception_to_payload
from batchflow.core.exceptions import BatchException, TaskletError
from batchflow.core.pipeline.execution import StepExecution
from batchflow.core.pipeline.types import RepeatStatus, StepStatus


@runtime_checkable
class Tasklet(Protocol):
    def execute(self, step_execution: StepExecution) -> RepeatStatus:
        ...


class TaskletStep:
    def __init__(self, name: str, tasklet: Tasklet):
        validate_step_name(name)
        self.name = name
        self.tasklet = tasklet

    def __repr__(self) -> str:
        return f"TaskletStep(name={self.name!r}, tasklet={self.tasklet!r})"

    def execute(self, step_execution: StepExecution) -> None:
        step_execution.status = StepStatus.STARTED
        step_execution.mark_started()
        logger.info("Start of step: {}, id: {}", step_execution.name, step_execution.id)

        try:
            repeat_status = self.tasklet.execute(step_execution)
        except Exception as exc:
            step_execution.status = StepStatus.FAILED
            payload = exception_to_payload(exc, TASKLET_ERROR).to_dict()
            payload["details"].setdefault("step", self.name)
            step_execution.error = payload
            step_execution.mark_finished()
            logger.error(
                "Error in step: {}, id: {}, error: {}", step_execution.name, step_execution.id, exc
            )
            if isinstance(exc, BatchException):
                raise
            raise TaskletError(
                message=str(exc) or exc.__class__.__name__,
                details={"step": self.name, "exception_class": exc.__class__.__name__},
            ) from exc

        if repeat_status == RepeatStatus.CONTINUABLE:
            logger.debug("Tasklet of step {} returned CONTINUABLE", step_execution.name)

        step_execution.status = StepStatus.SUCCESS
        step_execution.mark_finished()
        logger.info("End of step: {}, id: {}", step_execution.name, step_execution.id)
