# src/batchflow/__init__.py
"""
batchflow — engine de Jobs e Steps para processamento em lotes.

Um Job é uma sequência ordenada de Steps. Um Step pode ser:
    - orientado a chunks: lê itens um a um, processa e escreve em lotes
      de tamanho limitado, tolerando até `skip_limit` erros por item
    - tasklet: uma operação única e opaca

Arquitetura em alto nível:
    - core.item     → contrato Reader / Processor / Writer
    - core.pipeline → status, StepExecution, Chunk e protocolo de Step
    - core.engine   → Job
    - steps         → ChunkOrientedStep e TaskletStep
    - core.config   → configuração (YAML/JSON) e parâmetros de Step

Exemplo:

    reader = IterableItemReader([1, 2, 3])
    writer = ListItemWriter()
    step = ChunkOrientedStep("copy", reader, writer, chunk_size=2)
    JobInstance([step], name="example").run()
"""
# src/batchflow/__init__.py
from .core.engine.job import JobExecution, JobInstance
from .core.exceptions import (
    BatchException,
    ItemProcessorError,
    ItemReaderError,
    ItemWriterError,
    StepConfigurationError,
    StepFailure,
    TaskletError,
)
from .core.item import (
    BaseItemWriter,
    ItemProcessor,
    ItemReader,
    ItemWriter,
    IterableItemReader,
    ListItemWriter,
    LoggerWriter,
    PassThroughProcessor,
)
from .core.pipeline import Chunk, ChunkStatus, RepeatStatus, Step, StepExecution, StepStatus
from .steps import ChunkOrientedStep, Tasklet, TaskletStep

__all__ = [
    "JobExecution",
    "JobInstance",
    "BatchException",
    "ItemProcessorError",
    "ItemReaderError",
    "ItemWriterError",
    "StepConfigurationError",
    "StepFailure",
    "TaskletError",
    "BaseItemWriter",
    "ItemProcessor",
    "ItemReader",
    "ItemWriter",
    "IterableItemReader",
    "ListItemWriter",
    "LoggerWriter",
    "PassThroughProcessor",
    "Chunk",
    "ChunkStatus",
    "RepeatStatus",
    "Step",
    "StepExecution",
    "StepStatus",
    "ChunkOrientedStep",
    "Tasklet",
    "TaskletStep",
]
