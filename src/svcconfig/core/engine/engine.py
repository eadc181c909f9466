# src/svcconfig/core/engine/engine.py
"""
Engine de validação de service configs.

Este módulo define o `ValidationEngine`, responsável por conduzir, para
cada serviço declarado e em ordem de declaração, o fluxo:

    resolving → syntax_checking → semantic_validating → coverage_checking → done

Política de execução:
    - O oráculo é iniciado uma vez antes do primeiro serviço e parado uma
      vez depois do último, em qualquer caminho de saída (sucesso, primeira
      falha, exceção ou interrupção externa)
    - Fail-fast: a primeira falha encerra o run; não há agregação parcial
    - Documento ausente só é falha quando a cobertura é obrigatória, e nesse
      caso é reportado como falta de cobertura
    - A sintaxe é verificada antes de qualquer dial
    - Nenhum retry: as entradas são determinísticas

Decisões arquiteturais:
    - Exceções tipadas (`SvcConfigException`) viram `ErrorPayload` estável
    - Exceções inesperadas viram ENGINE_EXECUTION_ERROR sem stack trace
    - Falha ao iniciar o oráculo é propagada (`OracleSetupError`) sem
      nenhuma verificação por serviço
    - O validador semântico é obtido de uma fábrica (`address -> validator`),
      permitindo fakes em testes unitários

Limites explícitos:
    - Não resolve fontes (delegado ao SourceResolver)
    - Não interpreta políticas gRPC (delegado ao oráculo)
    - Não emite artefatos
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from ..config.settings import ValidationSettings
from ..descriptors import DescriptorIndex, ServiceDescriptor
from ..errors import ENGINE_EXECUTION_ERROR, ErrorPayload, missing_service_config
from ..exceptions import (
    MissingServiceConfigError,
    ServiceConfigSemanticError,
    ServiceConfigSyntaxError,
    SidecarReadError,
    SvcConfigException,
)
from ..pipeline import RUN_STEP_ID, RunContext
from ..resolution import ConfigurationDocument, Provenance, SourceResolver
from ..validation import GrpcDialValidator, LocalOracle, SemanticValidator, is_covered, parse_service_config
from .types import (
    FailureReason,
    OutcomeStatus,
    RunResult,
    RunState,
    ServiceStage,
    ValidationOutcome,
)


class Oracle(Protocol):
    def start(self) -> str:
        ...

    def shutdown(self) -> None:
        ...


ValidatorFactory = Callable[[str], SemanticValidator]


_REASONS = {
    SidecarReadError: FailureReason.IO,
    ServiceConfigSyntaxError: FailureReason.SYNTAX,
    ServiceConfigSemanticError: FailureReason.SEMANTIC,
    MissingServiceConfigError: FailureReason.MISSING_COVERAGE,
}


class _ServiceFailure(Exception):
    def __init__(self, stage: ServiceStage, document: Optional[ConfigurationDocument], cause: Exception):
        super().__init__(str(cause))
        self.stage = stage
        self.document = document
        self.cause = cause


class ValidationEngine:
    """
    Orquestra a validação de todos os serviços de um índice.

    Args:
        ctx: contexto do run (eventos e warnings).
        index: descritores do run.
        settings: configuração efetiva (raiz, required, oráculo).
        resolver: resolver explícito; por padrão um novo sobre `index`.
        oracle: oráculo com `start()/shutdown()`; por padrão `LocalOracle`.
        validator_factory: `address -> SemanticValidator`; por padrão
            `GrpcDialValidator` com o timeout configurado.
    """

    def __init__(
        self,
        ctx: RunContext,
        index: DescriptorIndex,
        settings: Optional[ValidationSettings] = None,
        *,
        resolver: Optional[SourceResolver] = None,
        oracle: Optional[Oracle] = None,
        validator_factory: Optional[ValidatorFactory] = None,
    ) -> None:
        self.ctx = ctx
        self.index = index
        self.settings = settings if settings is not None else ValidationSettings()
        self.resolver = resolver if resolver is not None else SourceResolver(
            index, root_path=self.settings.root_path, ctx=ctx
        )
        self.oracle: Oracle = oracle if oracle is not None else LocalOracle(host=self.settings.oracle_host)
        self.validator_factory: ValidatorFactory = validator_factory or self._default_validator
        self.state = RunState.IDLE

    def _default_validator(self, address: str) -> SemanticValidator:
        return GrpcDialValidator(address, dial_timeout_seconds=self.settings.dial_timeout_seconds)

    def _transition(self, state: RunState, **extra) -> None:
        self.state = state
        self.ctx.log(step_id=RUN_STEP_ID, level="INFO", message=f"run {state.value}", state=state.value, **extra)

    def _stage(self, service: ServiceDescriptor, stage: ServiceStage, **extra) -> ServiceStage:
        self.ctx.log(step_id=service.full_name, level="DEBUG", message=stage.value, stage=stage.value, **extra)
        return stage

    # ------------------------------------------------------------------
    # Guardrails: exceção -> ErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, exc: Exception, service: str) -> ErrorPayload:
        if isinstance(exc, SvcConfigException):
            return exc.to_payload()
        return ErrorPayload(
            type=ENGINE_EXECUTION_ERROR,
            message=str(exc) or "Erro inesperado durante a validação",
            details={"service": service, "exception_class": exc.__class__.__name__},
            hint="Verifique os eventos do run; nenhum fallback é aplicado automaticamente.",
        )

    def _failed(self, service: ServiceDescriptor, failure: _ServiceFailure) -> ValidationOutcome:
        exc = failure.cause
        error = self._exception_to_error(exc, service.full_name)
        document = failure.document
        outcome = ValidationOutcome(
            service=service.full_name,
            status=OutcomeStatus.FAILED,
            stage=failure.stage,
            reason=_REASONS.get(type(exc), FailureReason.INTERNAL),
            provenance=document.provenance if document is not None else Provenance.NONE,
            source=document.source if document is not None else error.details.get("source"),
            error=error,
            exception=exc,
        )
        self.ctx.log(
            step_id=service.full_name,
            level="ERROR",
            message=error.message,
            stage=failure.stage.value,
            error=error.to_dict(),
        )
        return outcome

    # ------------------------------------------------------------------
    # Fluxo por serviço
    # ------------------------------------------------------------------

    def _check_service(self, service: ServiceDescriptor, validator: SemanticValidator) -> ValidationOutcome:
        required = self.settings.required
        document: Optional[ConfigurationDocument] = None
        stage = self._stage(service, ServiceStage.RESOLVING)
        try:
            document = self.resolver.resolve(service)

            if not document.found:
                if required:
                    raise MissingServiceConfigError.from_payload(
                        missing_service_config(service=service.full_name)
                    )
                self._stage(service, ServiceStage.DONE, status=OutcomeStatus.SKIPPED.value)
                return ValidationOutcome(
                    service=service.full_name,
                    status=OutcomeStatus.SKIPPED,
                    stage=ServiceStage.DONE,
                )

            origin = {
                "service": service.full_name,
                "provenance": document.provenance.value,
                "source": document.source,
            }

            stage = self._stage(service, ServiceStage.SYNTAX_CHECKING)
            shape = parse_service_config(document.text, **origin)

            stage = self._stage(service, ServiceStage.SEMANTIC_VALIDATING)
            validator.validate(document.text, **origin)

            if required:
                stage = self._stage(service, ServiceStage.COVERAGE_CHECKING)
                if not is_covered(shape, service.full_name):
                    raise MissingServiceConfigError.from_payload(
                        missing_service_config(
                            service=service.full_name,
                            provenance=document.provenance.value,
                            source=document.source,
                        )
                    )
        except Exception as e:
            return self._failed(service, _ServiceFailure(stage, document, e))

        self._stage(service, ServiceStage.DONE, status=OutcomeStatus.PASSED.value)
        return ValidationOutcome(
            service=service.full_name,
            status=OutcomeStatus.PASSED,
            stage=ServiceStage.DONE,
            provenance=document.provenance,
            source=document.source,
        )

    def run(self) -> RunResult:
        result = RunResult(state=self.state)
        if not self.settings.validate:
            self.ctx.log(step_id=RUN_STEP_ID, level="INFO", message="validation disabled by config")
            return result

        address = self.oracle.start()
        self.ctx.meta["oracle_address"] = address
        self._transition(RunState.ORACLE_STARTED, address=address)
        try:
            validator = self.validator_factory(address)
            for service in self.index.services():
                outcome = self._check_service(service, validator)
                result.outcomes.append(outcome)
                if outcome.failed:
                    break
        finally:
            self.oracle.shutdown()
            self._transition(RunState.ORACLE_STOPPED)
            result.state = self.state

        return result
