# src/batchflow/steps/chunk_oriented.py
"""
Step orientado a chunks — o loop central do batchflow.

Cada iteração do loop:
    1. lê até `chunk_size` itens (ou até o fim dos dados)
    2. processa cada item lido; falhas descartam o item
    3. escreve o lote processado (write + flush), se não estiver vazio
    4. encerra com SUCCESS se a leitura sinalizou fim dos dados

Política de skip:
    Após cada incremento de qualquer contador de erro, a soma
    `read_error_count + process_error_count + write_error_count` é
    comparada com `skip_limit`. Ultrapassá-la (`>`) encerra o Step
    imediatamente com o status terminal da fase (READ_ERROR,
    PROCESSOR_ERROR ou WRITE_ERROR) e propaga o erro que a disparou.
    `skip_limit = 0` significa tolerância zero.

Ciclo de vida do writer:
    `open()` antes do loop e `close()` depois dele, exatamente uma vez
    cada, independentemente do resultado. Falhas são apenas registradas
    (log + `StepExecution.warnings`).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from loguru import logger

from batchflow.core.config.settings import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SKIP_LIMIT,
    resolve_step_settings,
    validate_step_parameters,
)
from batchflow.core.errors import PROCESSOR_ERROR, READ_ERROR, WRITE_ERROR, exception_to_payload
from batchflow.core.exceptions import (
    BatchException,
    ItemProcessorError,
    ItemReaderError,
    ItemWriterError,
)
from batchflow.core.item.contract import ItemProcessor, ItemReader, ItemWriter, PassThroughProcessor
from batchflow.core.pipeline.chunk import Chunk
from batchflow.core.pipeline.execution import StepExecution
from batchflow.core.pipeline.types import StepStatus


def _as_item_error(exc: Exception, error_cls: Type[BatchException], **details: Any) -> BatchException:
    """Garante que o erro de um colaborador pertença à classe da fase."""
    if isinstance(exc, error_cls):
        return exc
    return error_cls(
        message=str(exc) or exc.__class__.__name__,
        details={"exception_class": exc.__class__.__name__, **details},
    )


class ChunkOrientedStep:
    """
    Step iterativo leitura → processamento → escrita com tolerância a falhas limitada.

    Os colaboradores (reader, processor, writer) não pertencem ao Step e
    não devem ser usados por outro Step enquanto este executa.
    """

    def __init__(
        self,
        name: str,
        reader: ItemReader,
        writer: ItemWriter,
        processor: Optional[ItemProcessor] = None,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        skip_limit: int = DEFAULT_SKIP_LIMIT,
    ):
        validate_step_parameters(name=name, chunk_size=chunk_size, skip_limit=skip_limit)
        self.name = name
        self.reader = reader
        self.writer = writer
        self.processor = processor if processor is not None else PassThroughProcessor()
        self.chunk_size = chunk_size
        self.skip_limit = skip_limit

    @classmethod
    def from_config(
        cls,
        name: str,
        config: Optional[Dict[str, Any]],
        *,
        reader: ItemReader,
        writer: ItemWriter,
        processor: Optional[ItemProcessor] = None,
    ) -> "ChunkOrientedStep":
        settings = resolve_step_settings(config, name)
        return cls(
            name,
            reader,
            writer,
            processor,
            chunk_size=settings.chunk_size,
            skip_limit=settings.skip_limit,
        )

    def __repr__(self) -> str:
        return (
            f"ChunkOrientedStep(name={self.name!r}, chunk_size={self.chunk_size}, "
            f"skip_limit={self.skip_limit})"
        )

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------

    def execute(self, step_execution: StepExecution) -> None:
        step_execution.status = StepStatus.STARTING
        step_execution.mark_started()
        logger.info("Start of step: {}, id: {}", step_execution.name, step_execution.id)

        self._manage_lifecycle("open", step_execution)

        try:
            step_execution.status = StepStatus.STARTED
            while True:
                chunk = self._read_chunk(step_execution)
                processed = self._process_chunk(step_execution, chunk.items)
                self._write_chunk(step_execution, processed)

                if chunk.is_finished:
                    step_execution.status = StepStatus.SUCCESS
                    break
        finally:
            self._manage_lifecycle("close", step_execution)
            step_execution.mark_finished()
            self._log_end(step_execution)

    def _read_chunk(self, step_execution: StepExecution) -> Chunk:
        logger.debug("Start reading chunk")
        chunk = Chunk(self.chunk_size)

        while chunk.accepts_items:
            try:
                item = self.reader.read()
            except Exception as exc:
                error = _as_item_error(exc, ItemReaderError, step=self.name)
                chunk.mark_error()
                step_execution.read_error_count += 1
                logger.warning("Error reading item: {}", error)
                self._check_skip_limit(step_execution, error, exc, StepStatus.READ_ERROR, READ_ERROR)
                continue

            if item is None:
                chunk.finish()
            else:
                chunk.add(item)
                step_execution.read_count += 1

        logger.debug("Read chunk of {} items ({})", len(chunk), chunk.status.value)
        return chunk

    def _process_chunk(self, step_execution: StepExecution, items: List[Any]) -> List[Any]:
        logger.debug("Processing chunk of {} items", len(items))
        processed: List[Any] = []

        for item in items:
            try:
                processed.append(self.processor.process(item))
            except Exception as exc:
                error = _as_item_error(exc, ItemProcessorError, step=self.name)
                step_execution.process_error_count += 1
                logger.warning("Error processing item: {}", error)
                self._check_skip_limit(
                    step_execution, error, exc, StepStatus.PROCESSOR_ERROR, PROCESSOR_ERROR
                )
                continue
            step_execution.process_count += 1

        return processed

    def _write_chunk(self, step_execution: StepExecution, items: List[Any]) -> None:
        if not items:
            logger.debug("No items to write, skipping write call")
            return

        logger.debug("Writing chunk of {} items", len(items))
        try:
            self.writer.write(items)
            flush = getattr(self.writer, "flush", None)
            if flush is not None:
                flush()
        except Exception as exc:
            error = _as_item_error(exc, ItemWriterError, step=self.name, batch_size=len(items))
            step_execution.write_error_count += len(items)
            logger.warning("Error writing items: {}", error)
            self._check_skip_limit(step_execution, error, exc, StepStatus.WRITE_ERROR, WRITE_ERROR)
            return

        step_execution.write_count += len(items)

    # ------------------------------------------------------------------
    # Política de skip / erros não fatais
    # ------------------------------------------------------------------

    def is_skip_limit_reached(self, step_execution: StepExecution) -> bool:
        return step_execution.error_count > self.skip_limit

    def _check_skip_limit(
        self,
        step_execution: StepExecution,
        error: BatchException,
        cause: Exception,
        status: StepStatus,
        code: str,
    ) -> None:
        if not self.is_skip_limit_reached(step_execution):
            return

        step_execution.status = status
        payload = exception_to_payload(error, code).to_dict()
        payload["details"].setdefault("step", self.name)
        payload["details"]["skip_limit"] = self.skip_limit
        payload["details"]["error_count"] = step_execution.error_count
        step_execution.error = payload

        if error is cause:
            raise error
        raise error from cause

    def _manage_lifecycle(self, hook_name: str, step_execution: StepExecution) -> None:
        hook = getattr(self.writer, hook_name, None)
        if hook is None:
            return
        try:
            hook()
        except Exception as exc:
            message = f"writer.{hook_name}() falhou: {exc}"
            logger.warning("Non-fatal error: {}", message)
            step_execution.add_warning(message)

    def _log_end(self, step_execution: StepExecution) -> None:
        log = logger.info if step_execution.status == StepStatus.SUCCESS else logger.error
        log(
            "End of step: {}, id: {}, status: {}, read: {}, written: {}, errors: {}/{}/{}",
            step_execution.name,
            step_execution.id,
            step_execution.status.value,
            step_execution.read_count,
            step_execution.write_count,
            step_execution.read_error_count,
            step_execution.process_error_count,
            step_execution.write_error_count,
        )
