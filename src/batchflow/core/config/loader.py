# src/batchflow/core/config/loader.py
"""
Loader de configuração de Jobs do batchflow.

A configuração efetiva é:

    defaults (obrigatório)  ⊕  local (opcional, ignorado se não existir)

combinada por `deep_merge` e validada contra o schema do batchflow
(seções `logging`, `batch` e `steps`) antes de ser devolvida. Uma
configuração devolvida por `load_config` nunca quebra
`resolve_step_settings` nem `configure_logging_from_config`.

Formatos suportados: YAML (.yaml, .yml) e JSON (.json).

Invariantes:
    - O resultado é sempre um `dict`
    - Nenhuma configuração parcial é devolvida em caso de erro
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .settings import validate_config


_PARSERS: Dict[str, Callable[[TextIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def _read_mapping(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração existente; arquivo vazio vale `{}`.

    Raises:
        UnsupportedConfigFormatError: extensão fora de `_PARSERS`.
        InvalidConfigRootTypeError: raiz diferente de dict.
    """
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '<sem extensão>'} ({path})"
        )

    with path.open("r", encoding="utf-8") as f:
        data = parser(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__} ({path})"
        )
    return data


def load_config(*, defaults_path: str, local_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Carrega, combina e valida a configuração de um Job.

    Raises:
        DefaultsNotFoundError: o arquivo de defaults não existe.
        UnsupportedConfigFormatError / InvalidConfigRootTypeError: arquivo inválido.
        ConfigTypeConflictError: conflito de tipos no merge.
        InvalidConfigSectionError: seção `logging` malformada.
        StepConfigurationError: seções `batch`/`steps` malformadas ou
            parâmetros de Step fora do domínio.
    """
    defaults_file = Path(defaults_path)
    if not defaults_file.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    config = _read_mapping(defaults_file)

    if local_path is not None and Path(local_path).exists():
        config = deep_merge(config, _read_mapping(Path(local_path)))

    validate_config(config)
    return config
