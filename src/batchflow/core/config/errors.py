# src/batchflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do batchflow.

As exceções aqui definidas representam violações estruturais da
configuração (arquivo ausente, formato desconhecido, raiz inválida,
conflito de tipos no merge), e não erros de execução de Steps.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro por item do loop de chunks
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do batchflow.

    Permite captura genérica de falhas de configuração, distinta das
    falhas de execução de Steps (`BatchException`).
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não existe.

    O arquivo de defaults é obrigatório; sem ele não existe
    configuração efetiva válida.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada pelo loader.

    Formatos suportados (v1): YAML (.yaml, .yml) e JSON (.json).
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"batch": {"chunk_size": 10}}
        - override: {"batch": "grande"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidConfigSectionError(ConfigError):
    """
    Seção fora do domínio de Steps com formato inválido.

    Exemplos:
        - `logging: "debug"` (esperado um mapeamento)
        - `logging: {level: VERBOSE}` (nível desconhecido pelo loguru)

    Seções `batch` e `steps` levantam `StepConfigurationError`.
    """
