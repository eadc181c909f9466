"""
Verificação de cobertura de um serviço por uma service config.

Um serviço está coberto quando algum `methodConfig[].name[]` é:
    - `{}` (service e method vazios) → wildcard global
    - `{"service": "<nome completo>"}` (method vazio) → wildcard do serviço

Entradas que nomeiam apenas um método, ou um método específico do
serviço, não implicam cobertura do serviço inteiro. Função pura, sem I/O.
"""

from __future__ import annotations

from .syntax import ServiceConfigShape


def is_covered(shape: ServiceConfigShape, service_full_name: str) -> bool:
    for entry in shape.method_configs:
        for name in entry.names:
            if name.method:
                continue
            if not name.service or name.service == service_full_name:
                return True
    return False
