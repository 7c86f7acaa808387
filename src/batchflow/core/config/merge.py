# src/batchflow/core/config/merge.py
"""
Deep-merge de configuração (defaults + override local).

Política de merge:
    - mapeamento → merge recursivo por chave
    - lista      → substituída por completo
    - escalar    → substituído
    - `None` na base significa "não definido" e aceita qualquer override
    - tipos incompatíveis → ConfigTypeConflictError com o caminho da chave
      (ex.: `steps.import-persons.chunk_size`)

Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _dotted(path: Tuple[str, ...]) -> str:
    return ".".join(path) or "<raiz>"


def _merge_value(base_value: Any, override_value: Any, path: Tuple[str, ...]) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_mappings(base_value, override_value, path)

    if base_value is None or isinstance(override_value, list):
        return deepcopy(override_value)

    if type(base_value) is not type(override_value):
        raise ConfigTypeConflictError(
            f"Conflito de tipo em '{_dotted(path)}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )

    return deepcopy(override_value)


def _merge_mappings(
    base: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]
) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, override_value in override.items():
        key_path = path + (str(key),)
        if key in merged:
            merged[key] = _merge_value(merged[key], override_value, key_path)
        else:
            merged[key] = deepcopy(override_value)
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retorna uma nova configuração com `override` aplicado sobre `base`.

    Raises:
        ConfigTypeConflictError: se algum dos lados não for dict ou se uma
            chave tiver tipos incompatíveis entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            "Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_mappings(base, override, ())
