# src/svcconfig/core/resolution/model.py
"""
Tipos canônicos da resolução de service configs.

Componentes principais:
    - Provenance            → origem do documento (none, sidecar, anotação)
    - ConfigurationDocument → texto JSON resolvido + proveniência + fonte

Invariantes:
    - Um documento com proveniência NONE não possui texto nem fonte
    - O texto é mantido literalmente como lido (sem normalização), de
      modo que duas resoluções do mesmo sidecar são idênticas byte a byte
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.hashing import compute_document_hash


class Provenance(str, Enum):
    """
    Origem de um documento resolvido.

    Os valores textuais são estáveis e aparecem nos payloads de erro e
    nos eventos do RunContext.
    """
    NONE = "none"
    SIDECAR_FILE = "sidecar-file"
    PACKAGE_ANNOTATION = "package-annotation"


@dataclass(frozen=True)
class ConfigurationDocument:
    """
    Documento de service config resolvido para um serviço.

    Campos:
        - service: nome completo do serviço para o qual foi resolvido
        - provenance: origem do documento
        - text: JSON literal (vazio quando não encontrado)
        - source: caminho do sidecar ou caminho do arquivo anotado
    """
    service: str
    provenance: Provenance
    text: str = ""
    source: Optional[str] = None

    @classmethod
    def not_found(cls, service: str) -> "ConfigurationDocument":
        return cls(service=service, provenance=Provenance.NONE)

    @property
    def found(self) -> bool:
        return self.provenance is not Provenance.NONE

    @property
    def sha256(self) -> Optional[str]:
        return compute_document_hash(self.text) if self.found else None
