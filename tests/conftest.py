# tests/conftest.py
"""
Fixtures compartilhados para testes do batchflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (dict e YAML em string)
- sink em memória (ListItemWriter)
- uma fábrica de ChunkOrientedStep com defaults explícitos
- Steps dummy para testes do Job

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture realiza I/O
    - Steps dummy utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
"""

import pytest


@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """

    return """\
logging:
  level: INFO
batch:
  chunk_size: 10
  skip_limit: 0
steps:
  import-persons:
    chunk_size: 50
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de configuração local (override) semelhante ao uso real.

    Returns:
        str: Conteúdo YAML representando configuração local de override.
    """

    return """\
logging:
  level: DEBUG
steps:
  import-persons:
    skip_limit: 3
"""


@pytest.fixture
def dummy_config() -> dict:
    """Configuração já resolvida, sem loader nem merge."""
    return {
        "logging": {"level": "INFO"},
        "batch": {"chunk_size": 2, "skip_limit": 1},
        "steps": {"strict": {"skip_limit": 0}},
    }


@pytest.fixture
def memory_sink():
    from batchflow.core.item.memory import ListItemWriter

    return ListItemWriter()


@pytest.fixture
def make_chunk_step():
    """
    Fixture factory para ChunkOrientedStep.

    Defaults: nome "chunk-step", processor identidade, chunk_size=2 e
    skip_limit=0. Qualquer parâmetro pode ser sobrescrito por keyword.

    Returns:
        Callable[..., ChunkOrientedStep]
    """
    from batchflow.steps.chunk_oriented import ChunkOrientedStep

    def _make(reader, writer, *, name="chunk-step", processor=None, chunk_size=2, skip_limit=0):
        return ChunkOrientedStep(
            name,
            reader,
            writer,
            processor,
            chunk_size=chunk_size,
            skip_limit=skip_limit,
        )

    return _make


@pytest.fixture
def DummyStep():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de um Step.

    O Step retornado:
    - expõe `name`
    - implementa `execute(step_execution)`
    - registra cada execução em `executed` (contador)
    - quando `fail=True`, grava status FAILED e levanta RuntimeError

    Returns:
        type: Classe _DummyStep que pode ser instanciada pelos testes.
    """
    from batchflow.core.pipeline.types import StepStatus

    class _DummyStep:
        def __init__(self, name: str = "dummy", *, fail: bool = False, reads: int = 0):
            self.name = name
            self.fail = fail
            self.reads = reads
            self.executed = 0

        def execute(self, step_execution):
            self.executed += 1
            step_execution.status = StepStatus.STARTED
            step_execution.mark_started()
            step_execution.read_count = self.reads
            if self.fail:
                step_execution.status = StepStatus.FAILED
                step_execution.mark_finished()
                raise RuntimeError(f"{self.name} boom")
            step_execution.status = StepStatus.SUCCESS
            step_execution.mark_finished()

    return _DummyStep
