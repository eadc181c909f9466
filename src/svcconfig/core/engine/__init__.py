"""
Orquestração da validação por serviço.
"""
from ..config.settings import ValidationSettings
from .engine import Oracle, ValidationEngine, ValidatorFactory
from .types import (
    FailureReason,
    OutcomeStatus,
    RunResult,
    RunState,
    ServiceStage,
    ValidationOutcome,
)

__all__ = [
    "FailureReason",
    "Oracle",
    "OutcomeStatus",
    "RunResult",
    "RunState",
    "ServiceStage",
    "ValidationEngine",
    "ValidationOutcome",
    "ValidationSettings",
    "ValidatorFactory",
]
