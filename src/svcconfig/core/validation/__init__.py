"""
Validação de service configs: sintaxe, semântica (oráculo gRPC) e cobertura.
"""
from .coverage import is_covered
from .oracle import GrpcDialValidator, LocalOracle, SemanticValidator
from .syntax import (
    MethodConfigEntry,
    MethodName,
    ServiceConfigShape,
    check_syntax,
    parse_service_config,
)

__all__ = [
    "GrpcDialValidator",
    "LocalOracle",
    "MethodConfigEntry",
    "MethodName",
    "SemanticValidator",
    "ServiceConfigShape",
    "check_syntax",
    "is_covered",
    "parse_service_config",
]
