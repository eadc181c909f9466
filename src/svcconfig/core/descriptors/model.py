# src/svcconfig/core/descriptors/model.py
"""
Modelo mínimo de descritores consumido pelo svcconfig.

Os descritores são produzidos por um colaborador externo (plugin de
compilador, reflexão, testes) e chegam aqui já validados. O svcconfig só
precisa de identidade: nome do serviço, pacote, arquivo declarante e a
anotação `default_service_config` em nível de arquivo.

Componentes principais:
    - ServiceDescriptor → identidade de um serviço RPC declarado
    - FileDescriptor    → arquivo .proto com seus serviços e anotação
    - AnnotationState   → estado tri-valorado da anotação (absent/empty/populated)

Invariantes:
    - Descritores são imutáveis (frozen)
    - A ordem de `FileDescriptor.services` é a ordem de declaração
    - Anotação ausente (`None`) nunca é confundida com anotação vazia (`{}`)

Limites explícitos:
    - Não parseia FileDescriptorProto nem qualquer formato wire
    - Não valida nomes de pacote ou serviço
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class AnnotationState(str, Enum):
    """
    Estado da anotação `default_service_config` de um arquivo.

    Estados definidos:
        - ABSENT: a opção não está declarada no arquivo
        - EMPTY: a opção está declarada, mas sem nenhum campo
        - POPULATED: a opção carrega uma service config efetiva

    Somente POPULATED encerra a busca por anotação no pacote.
    """
    ABSENT = "absent"
    EMPTY = "empty"
    POPULATED = "populated"


def parent_package_name(package: str) -> str:
    """
    Nome curto do pacote pai, usado no nome convencional do sidecar.

    `einride.example.v1` → `example`; um pacote de um único componente
    (`demo`) usa o próprio nome.
    """
    parts = [p for p in package.split(".") if p]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    return parts[-2]


@dataclass(frozen=True)
class ServiceDescriptor:
    """
    Identidade de um serviço RPC declarado.

    Campos:
        - name: nome curto do serviço (ex.: `FooService`)
        - package: pacote dono (ex.: `einride.example.v1`)
        - file_path: caminho do arquivo declarante, relativo à raiz
        - parent_package: override opcional do nome do pacote pai
    """
    name: str
    package: str
    file_path: str
    parent_package: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def parent_package_name(self) -> str:
        if self.parent_package is not None:
            return self.parent_package
        return parent_package_name(self.package)


@dataclass(frozen=True)
class FileDescriptor:
    """
    Arquivo declarante: pacote, serviços em ordem de declaração e anotação.

    `default_service_config` é o valor já decodificado (mapeamento JSON) da
    opção de arquivo; `None` significa que a opção não foi declarada.
    Arquivos com `generate=False` participam apenas da busca de anotações.
    """
    path: str
    package: str
    services: Tuple[ServiceDescriptor, ...] = ()
    default_service_config: Optional[Dict[str, Any]] = field(default=None, compare=False)
    generate: bool = True

    @classmethod
    def build(
        cls,
        path: str,
        package: str,
        service_names: Tuple[str, ...] = (),
        *,
        default_service_config: Optional[Dict[str, Any]] = None,
        generate: bool = True,
        parent_package: Optional[str] = None,
    ) -> "FileDescriptor":
        services = tuple(
            ServiceDescriptor(name=n, package=package, file_path=path, parent_package=parent_package)
            for n in service_names
        )
        return cls(
            path=path,
            package=package,
            services=services,
            default_service_config=default_service_config,
            generate=generate,
        )

    @property
    def annotation_state(self) -> AnnotationState:
        if self.default_service_config is None:
            return AnnotationState.ABSENT
        if not self.default_service_config:
            return AnnotationState.EMPTY
        return AnnotationState.POPULATED
