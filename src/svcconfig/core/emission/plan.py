# src/svcconfig/core/emission/plan.py
"""
Plano de emissão: o que o estágio de geração de código recebe do core.

O core entrega tuplas `(documento, identidade, fonte)`; transformar essas
tuplas em arquivos gerados é responsabilidade do estágio de emissão.

Dois tipos de registro, espelhando as duas fontes de configuração:
    - SIDECAR: um registro por arquivo sidecar existente (deduplicado por
      caminho), constante `SERVICE_CONFIG`
    - ANNOTATION: um registro por arquivo com anotação POPULATED,
      constante `DEFAULT_SERVICE_CONFIG`

Invariantes:
    - Apenas arquivos marcados com `generate` produzem registros
    - A ordem segue a ordem de registro dos arquivos e de declaração dos
      serviços, portanto é estável entre runs
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import List

from ..descriptors import AnnotationState, DescriptorIndex, FileDescriptor, parent_package_name
from ..resolution import Provenance, SourceResolver


SIDECAR_CONSTANT = "SERVICE_CONFIG"
ANNOTATION_CONSTANT = "DEFAULT_SERVICE_CONFIG"


@dataclass(frozen=True)
class EmissionRecord:
    """
    Unidade entregue ao estágio de emissão.

    Campos:
        - target_path: caminho do artefato a gerar, relativo à saída
        - package: pacote dos descritores que o artefato acompanha
        - constant_name: nome da constante que carregará o documento
        - document: JSON literal
        - provenance: origem do documento
        - source_name: fonte citada no cabeçalho do artefato
    """
    target_path: str
    package: str
    constant_name: str
    document: str
    provenance: Provenance
    source_name: str


def _join(directory: str, name: str) -> str:
    return f"{directory}/{name}" if directory else name


def plan_sidecar_records(index: DescriptorIndex, resolver: SourceResolver) -> List[EmissionRecord]:
    records: List[EmissionRecord] = []
    seen = set()
    for file in index.files():
        if not file.generate:
            continue
        for service in file.services:
            document = resolver.resolve_from_sidecar(service)
            if document is None or document.source in seen:
                continue
            seen.add(document.source)

            base = os.path.basename(document.source)
            stem = base[: -len(".json")] if base.endswith(".json") else base
            records.append(
                EmissionRecord(
                    target_path=_join(os.path.dirname(file.path), f"{stem}_json.py"),
                    package=file.package,
                    constant_name=SIDECAR_CONSTANT,
                    document=document.text,
                    provenance=Provenance.SIDECAR_FILE,
                    source_name=base,
                )
            )
    return records


def _parent_name(file: FileDescriptor) -> str:
    # o override do pacote pai vive nos serviços; sem serviços, deriva do pacote
    if file.services:
        return file.services[0].parent_package_name
    return parent_package_name(file.package)


def plan_annotation_records(index: DescriptorIndex) -> List[EmissionRecord]:
    records: List[EmissionRecord] = []
    for file in index.files():
        if not file.generate or file.annotation_state is not AnnotationState.POPULATED:
            continue
        name = f"{_parent_name(file)}_grpc_service_config_pb.py"
        records.append(
            EmissionRecord(
                target_path=_join(os.path.dirname(file.path), name),
                package=file.package,
                constant_name=ANNOTATION_CONSTANT,
                document=json.dumps(file.default_service_config, indent=2),
                provenance=Provenance.PACKAGE_ANNOTATION,
                source_name=file.path,
            )
        )
    return records


def plan_emission(index: DescriptorIndex, resolver: SourceResolver) -> List[EmissionRecord]:
    """Registros de sidecar seguidos dos registros de anotação."""
    return plan_sidecar_records(index, resolver) + plan_annotation_records(index)
