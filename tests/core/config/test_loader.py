# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional
- formatos não suportados são rejeitados
- a raiz da configuração precisa ser um dicionário
- defaults + local resultam na configuração efetiva de Steps
- seções do batchflow malformadas são rejeitadas no carregamento

Decisões arquiteturais:
    - Defaults representam a base canônica do Job
    - Configuração local atua apenas como override explícito
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Precedência e mensagens de parâmetros de Step são cobertas em test_settings
"""

import pytest
from pathlib import Path

try:
    from batchflow.core.config.loader import load_config
    from batchflow.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        InvalidConfigSectionError,
        UnsupportedConfigFormatError,
    )
    from batchflow.core.config.settings import resolve_step_settings
    from batchflow.core.exceptions import StepConfigurationError
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Falha antecipada e explícita quando contratos do loader estão ausentes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/batchflow/core/config/loader.py (load_config)\n"
            "- src/batchflow/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo defaults é erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`DefaultsNotFoundError`)
        - Nenhuma configuração parcial é retornada
    """
    _require_imports()
    missing = tmp_path / "defaults.yaml"
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["logging"]["level"] == "INFO"
    assert out["batch"] == {"chunk_size": 10, "skip_limit": 0}


def test_load_defaults_and_local(
    tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml
):
    """
    Verifica o merge defaults + local e a resolução dos parâmetros de um Step.

    Invariantes:
        - Overrides locais têm precedência sobre defaults
        - Chaves não sobrescritas permanecem inalteradas
        - steps.<nome> herda de batch o que não define
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["logging"]["level"] == "DEBUG"
    assert out["steps"]["import-persons"] == {"chunk_size": 50, "skip_limit": 3}

    settings = resolve_step_settings(out, "import-persons")
    assert (settings.chunk_size, settings.skip_limit) == (50, 3)

    other = resolve_step_settings(out, "export-persons")
    assert (other.chunk_size, other.skip_limit) == (10, 0)


def test_json_defaults_are_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text('{"batch": {"chunk_size": 25}}', encoding="utf-8")

    out = load_config(defaults_path=str(defaults))
    assert out == {"batch": {"chunk_size": 25}}


def test_empty_file_is_empty_config(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yml"
    defaults.write_text("", encoding="utf-8")

    assert load_config(defaults_path=str(defaults)) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("batch = { chunk_size = 10 }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)


@pytest.mark.parametrize(
    "content, error_name",
    [
        ("steps:\n  - import-persons\n", "StepConfigurationError"),
        ("batch: 5\n", "StepConfigurationError"),
        ("batch:\n  chunk_size: 0\n", "StepConfigurationError"),
        ("logging:\n  level: VERBOSE\n", "InvalidConfigSectionError"),
    ],
)
def test_schema_is_validated_at_load_time(tmp_path: Path, content, error_name):
    """
    Verifica que load_config rejeita seções do batchflow malformadas.

    Invariantes:
        - `batch`/`steps` inválidos → StepConfigurationError
        - `logging` inválido → InvalidConfigSectionError (um ConfigError)
        - nenhuma configuração parcial é retornada
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(content, encoding="utf-8")

    expected = {
        "StepConfigurationError": StepConfigurationError,
        "InvalidConfigSectionError": InvalidConfigSectionError,
    }[error_name]
    with pytest.raises(expected):
        load_config(defaults_path=str(defaults))


def test_local_override_is_validated_after_merge(
    tmp_path: Path, project_like_config_defaults_yaml
):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text("steps:\n  import-persons:\n    skip_limit: -1\n", encoding="utf-8")

    with pytest.raises(StepConfigurationError) as excinfo:
        load_config(defaults_path=str(defaults), local_path=str(local))

    assert excinfo.value.details["step"] == "import-persons"
