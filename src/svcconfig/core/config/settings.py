# src/svcconfig/core/config/settings.py
"""
Leitura tipada das configurações do run.

Converte o dicionário resolvido por `load_config` numa estrutura
imutável consumida pelo resolver e pelo engine. Chaves ausentes recebem
os mesmos valores dos defaults empacotados; chaves presentes com tipo
errado são rejeitadas (`InvalidSettingError`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidSettingError


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidSettingError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _bool(section: Dict[str, Any], key: str, default: bool, *, where: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise InvalidSettingError(f"'{where}.{key}' must be a boolean")
    return value


@dataclass(frozen=True)
class ValidationSettings:
    """
    Configuração efetiva de um run de validação.

    Campos:
        - root_path: raiz sob a qual `dir(arquivo .proto)` é resolvido
        - validate: executa a validação (sintaxe, oráculo e cobertura)
        - required: todo serviço precisa de um documento que o cubra
        - oracle_host: host onde o oráculo local escuta
        - dial_timeout_seconds: limite explícito de cada dial
    """

    root_path: str = "."
    validate: bool = True
    required: bool = False
    oracle_host: str = "localhost"
    dial_timeout_seconds: float = 5.0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ValidationSettings":
        if not isinstance(config, dict):
            raise InvalidSettingError(f"config must be a dict, got {type(config).__name__}")

        paths = _section(config, "paths")
        validation = _section(config, "validation")
        oracle = _section(config, "oracle")

        root = paths.get("root", cls.root_path)
        if not isinstance(root, str):
            raise InvalidSettingError("'paths.root' must be a string")

        host = oracle.get("host", cls.oracle_host)
        if not isinstance(host, str) or not host.strip():
            raise InvalidSettingError("'oracle.host' must be a non-empty string")

        timeout = oracle.get("dial_timeout_seconds", cls.dial_timeout_seconds)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise InvalidSettingError("'oracle.dial_timeout_seconds' must be a positive number")

        return cls(
            root_path=root,
            validate=_bool(validation, "enabled", cls.validate, where="validation"),
            required=_bool(validation, "required", cls.required, where="validation"),
            oracle_host=host,
            dial_timeout_seconds=float(timeout),
        )
