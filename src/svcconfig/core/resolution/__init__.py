"""
Resolução de service configs: sidecar JSON, anotação de pacote e precedência.
"""
from .model import ConfigurationDocument, Provenance
from .resolver import SourceResolver
from .sidecar import SIDECAR_SUFFIX, SidecarReader, sidecar_file_name

__all__ = [
    "SIDECAR_SUFFIX",
    "ConfigurationDocument",
    "Provenance",
    "SidecarReader",
    "SourceResolver",
    "sidecar_file_name",
]
