# tests/core/engine/test_engine_end_to_end.py
"""
Testes ponta a ponta do ValidationEngine com o oráculo gRPC real.

Cenários:
- pacote `demo` com `demo.A` e `demo.B` e um sidecar que cobre apenas
  `demo.A`: com cobertura obrigatória, `demo.A` passa e `demo.B` falha
  por falta de cobertura
- documento com corpo incompatível falha na sintaxe, antes de qualquer dial
- documento sintaticamente válido com política desconhecida falha na
  validação semântica, sem falso positivo
"""

import pytest

from svcconfig.core.config import ValidationSettings, load_config
from svcconfig.core.descriptors import DescriptorIndex, FileDescriptor
from svcconfig.core.engine import FailureReason, OutcomeStatus, RunState, ServiceStage, ValidationEngine
from svcconfig.core.exceptions import MissingServiceConfigError


def _settings(tmp_path, **validation):
    config = load_config()
    config["paths"]["root"] = str(tmp_path)
    config["oracle"]["dial_timeout_seconds"] = 2.0
    config["validation"].update(validation)
    return ValidationSettings.from_config(config)


def _demo_index():
    return DescriptorIndex.from_files([FileDescriptor.build("demo/demo.proto", "demo", ("A", "B"))])


def test_partial_coverage_fails_on_uncovered_service(run_ctx, tmp_path, write_file):
    write_file("demo/demo_grpc_service_config.json", '{"methodConfig":[{"name":[{"service":"demo.A"}]}]}')
    engine = ValidationEngine(run_ctx, _demo_index(), _settings(tmp_path, required=True))

    result = engine.run()

    a, b = result.outcomes
    assert a.service == "demo.A"
    assert a.status is OutcomeStatus.PASSED
    assert b.service == "demo.B"
    assert b.status is OutcomeStatus.FAILED
    assert b.reason is FailureReason.MISSING_COVERAGE
    assert b.stage is ServiceStage.COVERAGE_CHECKING
    assert b.source.endswith("demo_grpc_service_config.json")
    assert result.state is RunState.ORACLE_STOPPED
    with pytest.raises(MissingServiceConfigError):
        result.raise_for_failure()


def test_full_coverage_passes(run_ctx, tmp_path, write_file):
    write_file(
        "demo/demo_grpc_service_config.json",
        '{"methodConfig":[{"name":[{"service":"demo.A"},{"service":"demo.B"}],"timeout":"2s"}]}',
    )
    result = ValidationEngine(run_ctx, _demo_index(), _settings(tmp_path, required=True)).run()

    assert result.ok
    assert [o.status for o in result.outcomes] == [OutcomeStatus.PASSED, OutcomeStatus.PASSED]


def test_unparseable_body_is_syntax_error(run_ctx, tmp_path, write_file):
    write_file("demo/demo_grpc_service_config.json", '{"methodConfig": "oops"}')
    result = ValidationEngine(run_ctx, _demo_index(), _settings(tmp_path)).run()

    assert result.failure.service == "demo.A"
    assert result.failure.reason is FailureReason.SYNTAX
    assert not any(e.get("stage") == "semantic_validating" for e in run_ctx.events)


def test_unknown_lb_policy_is_semantic_error(run_ctx, tmp_path):
    index = DescriptorIndex.from_files(
        [
            FileDescriptor.build(
                "demo/demo.proto",
                "demo",
                ("A",),
                default_service_config={
                    "loadBalancingConfig": [{"does_not_exist_lb": {}}],
                    "methodConfig": [{"name": [{}]}],
                },
            )
        ]
    )
    result = ValidationEngine(run_ctx, index, _settings(tmp_path, required=True)).run()

    failure = result.failure
    assert failure.reason is FailureReason.SEMANTIC
    assert failure.error.details["provenance"] == "package-annotation"
    assert failure.error.details["source"] == "demo/demo.proto"
