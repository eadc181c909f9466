# src/svcconfig/core/pipeline/context.py
"""
Contexto de execução de um run de validação.

Este módulo define o `RunContext`, a estrutura canônica que acompanha um
run do início ao fim e concentra a observabilidade do svcconfig.

O RunContext é o único meio de:
    - registro de eventos estruturados (transições de estado por serviço)
    - coleta de warnings não fatais (ex.: anotação presente porém vazia)

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Ausência de estado global ou logger compartilhado
    - Eventos são dicionários simples, serializáveis em JSON

Invariantes:
    - Eventos sempre incluem `run_id`, `step_id`, `level` e `timestamp`
    - `step_id` é o nome completo do serviço ou `"run"` para eventos globais
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não decide políticas de validação
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List
from datetime import timezone


RUN_STEP_ID = "run"


@dataclass
class RunContext:
    """
    Contexto de execução compartilhado de um run de validação.

    O RunContext consolida:
        - identidade da execução (run_id, created_at)
        - configuração resolvida do run
        - metadados livres (ex.: hash da configuração, endereço do oráculo)
        - eventos estruturados e warnings por serviço

    Decisões arquiteturais:
        - Resolver e engine registram eventos apenas via RunContext
        - O contexto é criado pelo chamador e passado por referência
    """
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def new(cls, *, run_id: str, config: Dict[str, Any]) -> "RunContext":
        return cls(run_id=run_id, created_at=datetime.now(timezone.utc), config=config)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)
        self.log(step_id=step_id, level="WARNING", message=message)

    def events_for(self, step_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("step_id") == step_id]
