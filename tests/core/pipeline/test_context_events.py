# tests/core/pipeline/test_context_events.py
"""
Testes do log estruturado do RunContext.

Invariantes:
    - Todo evento carrega run_id, step_id, level, message e timestamp
    - Campos extras são preservados
    - Warnings são agrupados por step_id e também viram eventos
"""

from svcconfig.core.pipeline import RUN_STEP_ID, RunContext


def test_log_appends_structured_event(run_ctx):
    run_ctx.log(step_id="demo.A", level="INFO", message="resolved", provenance="sidecar-file")

    event = run_ctx.events[-1]
    assert event["run_id"] == "run-test-001"
    assert event["step_id"] == "demo.A"
    assert event["level"] == "INFO"
    assert event["message"] == "resolved"
    assert event["provenance"] == "sidecar-file"
    assert "timestamp" in event


def test_warnings_are_grouped_by_step(run_ctx):
    run_ctx.add_warning(step_id="demo.A", message="empty annotation")
    run_ctx.add_warning(step_id="demo.A", message="again")
    run_ctx.add_warning(step_id="demo.B", message="other")

    assert run_ctx.warnings == {"demo.A": ["empty annotation", "again"], "demo.B": ["other"]}
    assert [e["level"] for e in run_ctx.events_for("demo.A")] == ["WARNING", "WARNING"]


def test_new_context_is_isolated():
    a = RunContext.new(run_id="a", config={})
    b = RunContext.new(run_id="b", config={})
    a.log(step_id=RUN_STEP_ID, level="INFO", message="x")
    assert b.events == []
    assert a.created_at.tzinfo is not None
