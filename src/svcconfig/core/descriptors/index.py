# src/svcconfig/core/descriptors/index.py
"""
Índice explícito de descritores de um run.

Este módulo define o `DescriptorIndex`, construído uma vez por run e
passado por referência ao resolver. Ele substitui qualquer registro
global de descritores.

O índice atua como uma camada de proteção antecipada, garantindo que:
    - cada arquivo seja registrado uma única vez
    - um mesmo serviço (nome completo) não seja declarado em dois arquivos
    - a ordem de registro seja preservada e usada em todas as varreduras

Decisões arquiteturais:
    - Conflitos estruturais são falhas fatais (`DescriptorConflictError`)
    - A busca de anotação por pacote percorre arquivos em ordem de
      registro; a primeira anotação POPULATED vence e encerra a busca
    - O resultado da busca é tri-valorado (`AnnotationLookup`)

Limites explícitos:
    - Não lê arquivos nem resolve sidecars
    - Não valida o conteúdo das anotações
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .model import AnnotationState, FileDescriptor, ServiceDescriptor


class DescriptorConflictError(ValueError):
    """
    Conjunto de descritores inconsistente.

    O run não pode prosseguir: nenhum registro parcial é aceito após a
    detecção do erro.
    """


class DuplicateFileError(DescriptorConflictError):
    """Arquivo com o mesmo caminho registrado duas vezes."""


class ConflictingServiceError(DescriptorConflictError):
    """Mesmo nome completo de serviço declarado em arquivos diferentes."""


@dataclass(frozen=True)
class AnnotationLookup:
    """Resultado da busca de anotação de um pacote."""
    package: str
    state: AnnotationState
    document: Optional[Dict[str, Any]] = None
    file: Optional[FileDescriptor] = None

    @property
    def found(self) -> bool:
        return self.state is AnnotationState.POPULATED


@dataclass
class DescriptorIndex:
    """
    Registro canônico dos arquivos de um run.

    Invariantes:
        - Cada `path` é único no índice
        - Cada nome completo de serviço pertence a exatamente um arquivo
        - `files()` reflete exatamente a ordem de registro
    """

    _files: Dict[str, FileDescriptor] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)
    _service_owner: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_files(cls, files: Iterable[FileDescriptor]) -> "DescriptorIndex":
        index = cls()
        for f in files:
            index.register(f)
        return index

    def register(self, file: FileDescriptor) -> None:
        path = getattr(file, "path", None)
        if not isinstance(path, str) or not path.strip():
            raise ValueError("file.path must be a non-empty string")

        if path in self._files:
            raise DuplicateFileError(f"Duplicate file: {path}")

        # valida todos os serviços antes de mutar o índice
        seen: Dict[str, str] = {}
        for service in file.services:
            owner = self._service_owner.get(service.full_name) or seen.get(service.full_name)
            if owner is not None:
                raise ConflictingServiceError(
                    f"Service {service.full_name} declared in both {owner} and {path}"
                )
            seen[service.full_name] = path

        self._files[path] = file
        self._order.append(path)
        self._service_owner.update(seen)

    def files(self) -> List[FileDescriptor]:
        return [self._files[p] for p in self._order]

    def files_by_package(self, package: str) -> List[FileDescriptor]:
        return [f for f in self.files() if f.package == package]

    def services(self) -> List[ServiceDescriptor]:
        """Serviços dos arquivos marcados para geração, em ordem de declaração."""
        return [s for f in self.files() if f.generate for s in f.services]

    def lookup_annotation(self, package: str) -> AnnotationLookup:
        state = AnnotationState.ABSENT
        for f in self.files_by_package(package):
            current = f.annotation_state
            if current is AnnotationState.POPULATED:
                return AnnotationLookup(
                    package=package,
                    state=current,
                    document=f.default_service_config,
                    file=f,
                )
            if current is AnnotationState.EMPTY:
                state = current
        return AnnotationLookup(package=package, state=state)
