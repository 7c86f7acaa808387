# src/batchflow/core/config/settings.py
"""
Schema da configuração do batchflow e resolução de parâmetros de Step.

Seções reconhecidas (todas opcionais):

    logging:
      level: INFO            # nível do loguru
    batch:
      chunk_size: 100        # defaults para todos os Steps orientados a chunks
      skip_limit: 0
    steps:
      import-persons:        # overrides por nome de Step
        skip_limit: 5

Precedência dos parâmetros de Step (da menor para a maior):
    1. defaults embutidos (`DEFAULT_CHUNK_SIZE`, `DEFAULT_SKIP_LIMIT`)
    2. seção `batch`
    3. seção `steps.<nome do step>`

Erros:
    - `batch`, `steps`, `steps.<nome>` que não são mapeamentos, ou
      parâmetros fora do domínio → StepConfigurationError (com hint)
    - `logging` malformado → InvalidConfigSectionError

Chaves desconhecidas são ignoradas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from batchflow.core.exceptions import StepConfigurationError

from .errors import InvalidConfigSectionError


DEFAULT_CHUNK_SIZE = 10
DEFAULT_SKIP_LIMIT = 0
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StepSettings:
    """Parâmetros efetivos de um Step orientado a chunks."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    skip_limit: int = DEFAULT_SKIP_LIMIT


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_chunk_size(value: Any, details: Dict[str, Any], hint: str) -> None:
    if not _is_int(value) or value < 1:
        raise StepConfigurationError(
            message="chunk_size deve ser um inteiro maior ou igual a 1",
            details={**details, "chunk_size": repr(value)},
            hint=hint,
        )


def _check_skip_limit(value: Any, details: Dict[str, Any], hint: str) -> None:
    if not _is_int(value) or value < 0:
        raise StepConfigurationError(
            message="skip_limit deve ser um inteiro maior ou igual a 0",
            details={**details, "skip_limit": repr(value)},
            hint=hint,
        )


def _section(parent: Dict[str, Any], key: str, label: str) -> Dict[str, Any]:
    """Seção ausente ou nula vale `{}`; qualquer outro não-dict é erro."""
    value = parent.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise StepConfigurationError(
            message=f"A seção '{label}' deve ser um mapeamento",
            details={"section": label, "received": type(value).__name__},
            hint=f"Declare '{label}' como chave: valor no arquivo de configuração",
        )
    return value


def validate_step_name(name: Any) -> None:
    if not isinstance(name, str) or not name.strip():
        raise StepConfigurationError(
            message="O nome do Step deve ser uma string não vazia",
            details={"name": repr(name)},
        )


def validate_step_parameters(*, name: Any, chunk_size: Any, skip_limit: Any) -> None:
    """Valida os invariantes de construção: name não vazio, chunk_size ≥ 1, skip_limit ≥ 0."""
    validate_step_name(name)
    _check_chunk_size(
        chunk_size, {"step": name}, "Ajuste batch.chunk_size ou steps.<step>.chunk_size"
    )
    _check_skip_limit(
        skip_limit, {"step": name}, "Ajuste batch.skip_limit ou steps.<step>.skip_limit"
    )


def resolve_log_level(config: Optional[Dict[str, Any]]) -> str:
    """Nível de log normalizado (maiúsculas) da seção `logging`."""
    logging_cfg = (config or {}).get("logging")
    if logging_cfg is None:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging_cfg, dict):
        raise InvalidConfigSectionError(
            f"A seção 'logging' deve ser um mapeamento, recebido: {type(logging_cfg).__name__}"
        )

    level = logging_cfg.get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise InvalidConfigSectionError(
            f"logging.level inválido: {level!r} (esperado um de {', '.join(LOG_LEVELS)})"
        )
    return level.upper()


def resolve_step_settings(config: Optional[Dict[str, Any]], step_name: str) -> StepSettings:
    config = config or {}
    batch_cfg = _section(config, "batch", "batch")
    steps_cfg = _section(config, "steps", "steps")
    step_cfg = _section(steps_cfg, step_name, f"steps.{step_name}")

    chunk_size = step_cfg.get("chunk_size", batch_cfg.get("chunk_size", DEFAULT_CHUNK_SIZE))
    skip_limit = step_cfg.get("skip_limit", batch_cfg.get("skip_limit", DEFAULT_SKIP_LIMIT))

    validate_step_parameters(name=step_name, chunk_size=chunk_size, skip_limit=skip_limit)
    return StepSettings(chunk_size=chunk_size, skip_limit=skip_limit)


def validate_config(config: Dict[str, Any]) -> None:
    """
    Valida uma configuração resolvida contra o schema do batchflow.

    Os valores da seção `batch` são validados mesmo que nenhum Step os
    herde; cada `steps.<nome>` é validado já combinado com `batch`.
    """
    resolve_log_level(config)

    batch_cfg = _section(config, "batch", "batch")
    batch_hint = "Ajuste os valores da seção batch"
    if "chunk_size" in batch_cfg:
        _check_chunk_size(batch_cfg["chunk_size"], {"section": "batch"}, batch_hint)
    if "skip_limit" in batch_cfg:
        _check_skip_limit(batch_cfg["skip_limit"], {"section": "batch"}, batch_hint)

    for step_name in _section(config, "steps", "steps"):
        resolve_step_settings(config, step_name)
