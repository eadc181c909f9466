# src/svcconfig/__init__.py
"""
svcconfig — resolução e validação de service configs gRPC.

Este pacote raiz define o namespace público do svcconfig, uma biblioteca
que determina, para cada serviço RPC declarado, o documento de service
config efetivo e verifica que ele é aceito por um runtime gRPC real.

Princípios centrais:
    - A precedência entre fontes é explícita e determinística
    - Validação semântica é delegada a um cliente gRPC real (oráculo)
    - Falhas são fatais, tipadas e rastreáveis (fail-fast)

Arquitetura em alto nível:
    - core.descriptors → modelo de descritores e índice por pacote
    - core.resolution  → sidecar JSON e anotação de pacote (precedência)
    - core.validation  → sintaxe, oráculo gRPC e cobertura
    - core.engine      → orquestração por serviço
    - core.emission    → registros entregues ao estágio de emissão
    - core.config      → carregamento e merge das configurações do run

Limites explícitos:
    - Não parseia formatos wire de descritores
    - Não gera código (templating fica fora do core)
    - Não persiste configuração resolvida
"""
from .core.engine import RunResult, ValidationEngine, ValidationSettings
from .core.resolution import ConfigurationDocument, Provenance, SourceResolver

__all__ = [
    "ConfigurationDocument",
    "Provenance",
    "RunResult",
    "SourceResolver",
    "ValidationEngine",
    "ValidationSettings",
]
