# src/svcconfig/core/__init__.py
"""
Core do svcconfig.

Este pacote reúne a implementação canônica de resolução e validação de
service configs, independente de CLI, plugins de compilador ou templates.

O core é projetado para ser:
    - determinístico (mesma entrada, mesma sequência de veredictos)
    - testável de forma isolada (oráculo substituível por fake)
    - livre de estado global (índice e resolver são explícitos por run)

Componentes principais:
    - descriptors → FileDescriptor, ServiceDescriptor, DescriptorIndex
    - resolution  → SidecarReader, SourceResolver, ConfigurationDocument
    - validation  → parse_service_config, is_covered, LocalOracle
    - engine      → ValidationEngine, RunResult
    - emission    → plan_emission, EmissionRecord
    - config      → load_config, deep_merge, hashing

Limites explícitos:
    - Não parseia CodeGeneratorRequest nem flags de linha de comando
    - Não reimplementa a semântica de políticas do cliente gRPC
"""
