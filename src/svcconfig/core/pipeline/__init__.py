"""
Infraestrutura de execução do svcconfig.

Exporta o `RunContext`, contexto de execução e log estruturado de um run.
"""
from .context import RUN_STEP_ID, RunContext

__all__ = ["RUN_STEP_ID", "RunContext"]
