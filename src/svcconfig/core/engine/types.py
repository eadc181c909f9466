# src/svcconfig/core/engine/types.py
"""
Tipos canônicos da orquestração de validação.

Componentes principais:
    - RunState          → estados do run (idle, oracle_started, oracle_stopped)
    - ServiceStage      → estágios por serviço (resolving … done)
    - OutcomeStatus     → veredicto final por serviço
    - FailureReason     → classificação estruturada da falha
    - ValidationOutcome → resultado imutável por serviço
    - RunResult         → resultados ordenados do run

Invariantes:
    - Enums possuem valores textuais canônicos (serializáveis em eventos)
    - Um RunResult contém no máximo um outcome FAILED, sempre o último
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..errors import ErrorPayload
from ..exceptions import SvcConfigException
from ..resolution import Provenance


class RunState(str, Enum):
    IDLE = "idle"
    ORACLE_STARTED = "oracle_started"
    ORACLE_STOPPED = "oracle_stopped"


class ServiceStage(str, Enum):
    RESOLVING = "resolving"
    SYNTAX_CHECKING = "syntax_checking"
    SEMANTIC_VALIDATING = "semantic_validating"
    COVERAGE_CHECKING = "coverage_checking"
    DONE = "done"


class OutcomeStatus(str, Enum):
    """
    Veredicto final de um serviço.

    Estados definidos:
        - PASSED: documento resolvido, aceito e (se exigido) cobrindo o serviço
        - SKIPPED: nenhum documento e cobertura não obrigatória
        - FAILED: primeira falha do run; encerra a validação
    """
    PASSED = "passed"
    SKIPPED = "skipped"
    FAILED = "failed"


class FailureReason(str, Enum):
    NONE = "none"
    IO = "io"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"
    MISSING_COVERAGE = "missing-coverage"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Resultado imutável da validação de um serviço.

    Campos:
        - service: nome completo do serviço
        - status / reason: veredicto e classificação da falha
        - stage: último estágio alcançado
        - provenance / source: origem do documento avaliado
        - error: payload canônico quando FAILED
        - exception: exceção tipada original (não serializada)
    """
    service: str
    status: OutcomeStatus
    stage: ServiceStage
    reason: FailureReason = FailureReason.NONE
    provenance: Provenance = Provenance.NONE
    source: Optional[str] = None
    error: Optional[ErrorPayload] = None
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "service": self.service,
            "status": self.status.value,
            "stage": self.stage.value,
            "reason": self.reason.value,
            "provenance": self.provenance.value,
            "source": self.source,
            "error": self.error.to_dict() if self.error is not None else None,
        }


@dataclass
class RunResult:
    outcomes: List[ValidationOutcome] = field(default_factory=list)
    state: RunState = RunState.IDLE

    @property
    def failure(self) -> Optional[ValidationOutcome]:
        for outcome in self.outcomes:
            if outcome.failed:
                return outcome
        return None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        failure = self.failure
        if failure is None:
            return
        if failure.exception is not None:
            raise failure.exception
        raise SvcConfigException(
            message=failure.error.message if failure.error else "validation failed",
            details=dict(failure.error.details) if failure.error else {"service": failure.service},
        )
