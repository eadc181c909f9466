# src/svcconfig/core/config/__init__.py

"""
Camada de configuração do run do svcconfig.

Responsabilidades do pacote:
    - Carregamento de arquivos (defaults + overrides locais)
    - Deep-merge determinístico
    - Leitura tipada (`ValidationSettings`)
    - Hash canônico para rastreabilidade

Limites explícitos:
    - Não carrega nem valida documentos de service config gRPC
"""
from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, compute_document_hash
from .loader import load_config
from .merge import deep_merge
from .settings import ValidationSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidSettingError",
    "UnsupportedConfigFormatError",
    "ValidationSettings",
    "compute_config_hash",
    "compute_document_hash",
    "deep_merge",
    "load_config",
]
