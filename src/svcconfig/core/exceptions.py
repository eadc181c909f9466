"""
svcconfig — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do svcconfig.

Objetivo:
- Permitir que resolver, validadores e engine levantem falhas semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nos pontos de falha da validação

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção é tratada com retry: as entradas são determinísticas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    ENGINE_EXECUTION_ERROR,
    MISSING_SERVICE_CONFIG,
    ORACLE_SETUP_ERROR,
    SERVICE_CONFIG_SEMANTIC_ERROR,
    SERVICE_CONFIG_SYNTAX_ERROR,
    SIDECAR_READ_ERROR,
    ErrorPayload,
)


@dataclass(frozen=True)
class SvcConfigException(Exception):
    """Base class para exceções internas do svcconfig.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    error_type: ClassVar[str] = ENGINE_EXECUTION_ERROR

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:
        service = self.details.get("service")
        source = self.details.get("source")
        parts = [self.message]
        if service:
            parts.append(f"service={service}")
        if source:
            parts.append(f"source={source}")
        reason = self.details.get("reason")
        if reason:
            parts.append(f"reason={reason}")
        doc_url = self.details.get("doc_url")
        if doc_url:
            parts.append(f"see: {doc_url}")
        return " | ".join(parts)

    @classmethod
    def from_payload(cls, payload: ErrorPayload) -> "SvcConfigException":
        return cls(message=payload.message, details=dict(payload.details), hint=payload.hint)

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.error_type,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Resolução
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SidecarReadError(SvcConfigException):
    """Arquivo sidecar existe, mas não pôde ser lido (permissão, I/O, encoding)."""

    error_type: ClassVar[str] = SIDECAR_READ_ERROR


# ---------------------------------------------------------------------------
# Validação
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServiceConfigSyntaxError(SvcConfigException):
    """Documento não possui a estrutura esperada de service config."""

    error_type: ClassVar[str] = SERVICE_CONFIG_SYNTAX_ERROR


@dataclass(frozen=True)
class ServiceConfigSemanticError(SvcConfigException):
    """Cliente gRPC rejeitou o documento durante o dial."""

    error_type: ClassVar[str] = SERVICE_CONFIG_SEMANTIC_ERROR


@dataclass(frozen=True)
class MissingServiceConfigError(SvcConfigException):
    """Cobertura obrigatória ausente: nenhum documento ou documento sem o serviço."""

    error_type: ClassVar[str] = MISSING_SERVICE_CONFIG


# ---------------------------------------------------------------------------
# Engine / Oráculo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OracleSetupError(SvcConfigException):
    """Oráculo local não pôde ser iniciado; nenhuma validação é tentada."""

    error_type: ClassVar[str] = ORACLE_SETUP_ERROR
