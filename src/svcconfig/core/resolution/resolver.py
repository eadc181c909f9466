# src/svcconfig/core/resolution/resolver.py
"""
Resolução da service config efetiva de um serviço.

Política de precedência (a primeira fonte encontrada vence):
    1. Sidecar JSON em `<root>/<dir do .proto>/<parent>_grpc_service_config.json`
    2. Anotação `default_service_config` de um arquivo do pacote do serviço
    3. Nada encontrado → documento com proveniência NONE (não é erro)

Decisões arquiteturais:
    - O índice de descritores é explícito e passado no construtor
    - A leitura de sidecars é memoizada por caminho resolvido
    - O documento é checado sintaticamente logo após a leitura, para falhar
      cedo apontando a fonte exata
    - Sidecar existente porém ilegível é erro fatal (`SidecarReadError`),
      distinto de "não encontrado"

Invariantes:
    - Duas chamadas para o mesmo serviço retornam documentos idênticos
    - Um sidecar compartilhado por N serviços é lido do disco uma vez

Limites explícitos:
    - Não valida semântica nem cobertura
    - Não decide se a ausência de documento é aceitável
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from ..descriptors import AnnotationState, DescriptorIndex, ServiceDescriptor
from ..pipeline import RunContext
from ..validation.syntax import check_syntax
from .model import ConfigurationDocument, Provenance
from .sidecar import SidecarReader, sidecar_file_name


class SourceResolver:
    """Aplica a precedência sidecar → anotação → ausente para um serviço."""

    def __init__(
        self,
        index: DescriptorIndex,
        *,
        root_path: str = ".",
        reader: Optional[SidecarReader] = None,
        ctx: Optional[RunContext] = None,
    ) -> None:
        self.index = index
        self.root_path = root_path
        self.reader = reader if reader is not None else SidecarReader()
        self.ctx = ctx

    def _log(self, service: ServiceDescriptor, level: str, message: str, **extra) -> None:
        if self.ctx is not None:
            self.ctx.log(step_id=service.full_name, level=level, message=message, **extra)

    def sidecar_path(self, service: ServiceDescriptor) -> Path:
        directory = os.path.dirname(service.file_path)
        return Path(self.root_path) / directory / sidecar_file_name(service.parent_package_name)

    def resolve_from_sidecar(self, service: ServiceDescriptor) -> Optional[ConfigurationDocument]:
        path = self.sidecar_path(service)
        if not self.reader.exists(path):
            return None

        text = self.reader.read(path, service=service.full_name)
        check_syntax(
            text,
            source=str(path),
            service=service.full_name,
            provenance=Provenance.SIDECAR_FILE.value,
        )
        return ConfigurationDocument(
            service=service.full_name,
            provenance=Provenance.SIDECAR_FILE,
            text=text,
            source=str(path),
        )

    def resolve_from_annotation(self, service: ServiceDescriptor) -> Optional[ConfigurationDocument]:
        lookup = self.index.lookup_annotation(service.package)
        if lookup.state is AnnotationState.EMPTY and self.ctx is not None:
            self.ctx.add_warning(
                step_id=service.full_name,
                message=f"package {service.package} declares an empty default_service_config",
            )
        if not lookup.found:
            return None

        source = lookup.file.path if lookup.file is not None else None
        text = json.dumps(lookup.document, indent=2)
        check_syntax(
            text,
            source=source,
            service=service.full_name,
            provenance=Provenance.PACKAGE_ANNOTATION.value,
        )
        return ConfigurationDocument(
            service=service.full_name,
            provenance=Provenance.PACKAGE_ANNOTATION,
            text=text,
            source=source,
        )

    def resolve(self, service: ServiceDescriptor) -> ConfigurationDocument:
        document = self.resolve_from_sidecar(service)
        if document is None:
            document = self.resolve_from_annotation(service)
        if document is None:
            document = ConfigurationDocument.not_found(service.full_name)

        self._log(
            service,
            "INFO",
            "resolved service config" if document.found else "no service config found",
            provenance=document.provenance.value,
            source=document.source,
            document_sha256=document.sha256,
        )
        return document
