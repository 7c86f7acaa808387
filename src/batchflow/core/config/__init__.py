# src/batchflow/core/config/__init__.py

"""
Camada de configuração do batchflow.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação do schema (`logging`, `batch`, `steps`)
    - Resolução de parâmetros de Step (chunk_size, skip_limit)

Limites explícitos:
    - Não executa Jobs nem Steps
    - Não instala sinks de logging (ver `batchflow.core.logging`)
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSectionError,
    UnsupportedConfigFormatError,
)
from .loader import load_config
from .merge import deep_merge
from .settings import StepSettings, resolve_step_settings, validate_config

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigSectionError",
    "UnsupportedConfigFormatError",
    "load_config",
    "deep_merge",
    "StepSettings",
    "resolve_step_settings",
    "validate_config",
]
