# tests/conftest.py
"""
Fixtures compartilhados para testes do svcconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações do run em YAML (defaults + local)
- contexto de execução determinístico (RunContext)
- árvore de arquivos .proto/sidecar em `tmp_path`
- oráculo e validador falsos com comportamento roteirizado

Decisões arquiteturais:
    - O oráculo gRPC real fica restrito aos testes de integração
      (`test_oracle_grpc.py`, `test_engine_end_to_end.py`)
    - Fakes registram chamadas para que os testes provem ordem e ciclo
      de vida (start/shutdown exatamente uma vez)
    - Imports do core são lazy para clarear falhas de import

Limites explícitos:
    - Nenhuma fixture executa um run completo
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config do run
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao `defaults.yaml` empacotado.

    Returns:
        str: Conteúdo YAML de defaults.
    """
    return """\
paths:
  root: "."
validation:
  enabled: true
  required: false
oracle:
  host: localhost
  dial_timeout_seconds: 5.0
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: exige cobertura e encurta o dial."""
    return """\
validation:
  required: true
oracle:
  dial_timeout_seconds: 2
"""


# =====================================================
# Contexto de execução
# =====================================================

@pytest.fixture
def run_ctx():
    """
    RunContext determinístico para testes.

    Invariantes:
        - O timestamp é timezone-aware (UTC)
        - Eventos e warnings começam vazios
    """
    from svcconfig.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={},
    )


# =====================================================
# Árvore de arquivos
# =====================================================

@pytest.fixture
def write_file(tmp_path):
    """
    Escreve `content` em `tmp_path/relative`, criando diretórios.

    Returns:
        Callable[[str, str], Path]: função de escrita relativa a `tmp_path`.
    """
    def _write(relative: str, content: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =====================================================
# Oráculo e validador falsos
# =====================================================

@pytest.fixture
def FakeOracle():
    """
    Classe de oráculo falso que apenas registra o ciclo de vida.

    Usado por:
        - Testes de engine (start/shutdown exatamente uma vez, em todo caminho)
    """
    class _FakeOracle:
        def __init__(self, fail_start=None):
            self.fail_start = fail_start
            self.starts = 0
            self.shutdowns = 0

        def start(self):
            self.starts += 1
            if self.fail_start is not None:
                raise self.fail_start
            return "fake-oracle:0"

        def shutdown(self):
            self.shutdowns += 1

    return _FakeOracle


@pytest.fixture
def ScriptedValidator():
    """
    Classe de validador semântico com rejeições roteirizadas.

    `reject` é o conjunto de substrings: um documento que contém qualquer
    uma delas é rejeitado com `ServiceConfigSemanticError`. Todas as
    chamadas ficam registradas em `calls` como `(service, document)`.
    """
    from svcconfig.core.errors import service_config_semantic_error
    from svcconfig.core.exceptions import ServiceConfigSemanticError

    class _ScriptedValidator:
        def __init__(self, reject=(), raise_exc=None):
            self.reject = tuple(reject)
            self.raise_exc = raise_exc
            self.calls = []

        def validate(self, document, *, service=None, provenance=None, source=None):
            self.calls.append((service, document))
            if self.raise_exc is not None:
                raise self.raise_exc
            if any(marker in document for marker in self.reject):
                raise ServiceConfigSemanticError.from_payload(
                    service_config_semantic_error(
                        service=service,
                        provenance=provenance,
                        source=source,
                        reason="scripted rejection",
                    )
                )

    return _ScriptedValidator
