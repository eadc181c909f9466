# tests/core/config/test_config_loader.py
"""
Testes do carregador das configurações do run (load_config).

Os testes asseguram que:
- os defaults empacotados são usados quando nenhum caminho é informado
- um defaults explícito inexistente é erro fatal
- o arquivo local é opcional e tem prioridade quando presente
- formatos e tipos raiz inválidos são rejeitados

Limites explícitos:
    - Não valida semântica das chaves (ver test_settings.py)
"""

import pytest
from pathlib import Path

try:
    from svcconfig.core.config.loader import load_config
    from svcconfig.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem explícita, quando os módulos
    `loader` ou `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/svcconfig/core/config/loader.py (load_config)\n"
            "- src/svcconfig/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_packaged_defaults_are_used_without_path():
    """
    Verifica que, sem `defaults_path`, os defaults empacotados são carregados.

    Invariantes:
        - validação habilitada e cobertura não obrigatória por padrão
        - o dial possui limite explícito
    """
    _require_imports()
    out = load_config()
    assert out["validation"]["enabled"] is True
    assert out["validation"]["required"] is False
    assert out["oracle"]["dial_timeout_seconds"] > 0
    assert out["paths"]["root"] == "."


def test_missing_defaults_raises(tmp_path: Path):
    """Um defaults explícito inexistente é erro fatal (`DefaultsNotFoundError`)."""
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"))


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["validation"]["required"] is False
    assert out["oracle"]["host"] == "localhost"


def test_load_defaults_and_local(tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml):
    """
    Verifica o merge defaults + local.

    O resultado deve refletir:
    - valores sobrescritos pelo local (required, dial_timeout_seconds)
    - valores preservados do defaults (enabled, host, root)
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["validation"]["required"] is True
    assert out["validation"]["enabled"] is True
    assert out["oracle"]["dial_timeout_seconds"] == 2
    assert out["oracle"]["host"] == "localhost"
    assert out["paths"]["root"] == "."


def test_local_json_override(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.json"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text('{"paths": {"root": "proto"}}', encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["paths"]["root"] == "proto"


def test_empty_defaults_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")
    assert load_config(defaults_path=str(defaults)) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("validation = { required = true }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))
