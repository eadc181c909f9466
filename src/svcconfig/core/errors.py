"""
svcconfig — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do svcconfig.
Erros fazem parte do contrato operacional da validação e devem ser:

- explícitos
- serializáveis
- rastreáveis (serviço, proveniência e fonte do documento)
- acionáveis (sempre apontam para a documentação de service config)

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


DOC_URL = "https://github.com/grpc/grpc/blob/master/doc/service_config.md"


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do svcconfig.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
      (service, provenance, source, doc_url, ...)
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Resolução
SIDECAR_READ_ERROR = "SIDECAR_READ_ERROR"

# Validação
SERVICE_CONFIG_SYNTAX_ERROR = "SERVICE_CONFIG_SYNTAX_ERROR"
SERVICE_CONFIG_SEMANTIC_ERROR = "SERVICE_CONFIG_SEMANTIC_ERROR"
MISSING_SERVICE_CONFIG = "MISSING_SERVICE_CONFIG"

# Engine / Oráculo
ORACLE_SETUP_ERROR = "ORACLE_SETUP_ERROR"
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def _details(
    *,
    service: Optional[str],
    provenance: Optional[str],
    source: Optional[str],
    **extra: Any,
) -> Dict[str, Any]:
    details: Dict[str, Any] = {
        "service": service,
        "provenance": provenance,
        "source": source,
        "doc_url": DOC_URL,
    }
    details.update(extra)
    return details


def sidecar_read_error(
    *,
    service: Optional[str],
    source: str,
    reason: str,
    hint: str = "Verifique permissões e o tipo do arquivo sidecar; um arquivo existente deve ser legível como UTF-8.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SIDECAR_READ_ERROR,
        message="Arquivo sidecar de service config existe mas não pôde ser lido",
        details=_details(service=service, provenance="sidecar-file", source=source, reason=reason),
        hint=hint,
    )


def service_config_syntax_error(
    *,
    service: Optional[str],
    provenance: Optional[str],
    source: Optional[str],
    reason: str,
    hint: str = "Corrija o JSON: 'methodConfig' deve ser uma lista e cada 'name' uma lista de {service, method}.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SERVICE_CONFIG_SYNTAX_ERROR,
        message="Service config com estrutura inválida",
        details=_details(service=service, provenance=provenance, source=source, reason=reason),
        hint=hint,
    )


def service_config_semantic_error(
    *,
    service: Optional[str],
    provenance: Optional[str],
    source: Optional[str],
    reason: str,
    hint: str = "O cliente gRPC rejeitou o documento; revise políticas de load balancing, retry e timeouts.",
) -> ErrorPayload:
    return ErrorPayload(
        type=SERVICE_CONFIG_SEMANTIC_ERROR,
        message="Service config rejeitada pelo cliente gRPC",
        details=_details(service=service, provenance=provenance, source=source, reason=reason),
        hint=hint,
    )


def missing_service_config(
    *,
    service: str,
    provenance: Optional[str] = None,
    source: Optional[str] = None,
    hint: str = "Declare um methodConfig com {\"service\": \"<nome completo>\"} ou um wildcard global {}.",
) -> ErrorPayload:
    return ErrorPayload(
        type=MISSING_SERVICE_CONFIG,
        message="Serviço sem service config obrigatória",
        details=_details(service=service, provenance=provenance, source=source),
        hint=hint,
    )


def oracle_setup_error(
    *,
    address: Optional[str],
    reason: str,
    hint: str = "Garanta que é possível abrir uma porta TCP local antes de reexecutar a validação.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ORACLE_SETUP_ERROR,
        message="Não foi possível iniciar o oráculo gRPC local",
        details={"address": address, "reason": reason, "doc_url": DOC_URL},
        hint=hint,
    )
