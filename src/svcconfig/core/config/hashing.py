# src/svcconfig/core/config/hashing.py
"""
Hashing canônico para rastreabilidade.

Dois usos:
    - `compute_config_hash`: identidade estrutural das configurações do run
      (JSON canônico com chaves ordenadas, SHA-256)
    - `compute_document_hash`: identidade byte a byte de um documento de
      service config, usada nos eventos para provar que duas resoluções
      retornaram o mesmo conteúdo
"""

import hashlib
import json
from typing import Any, Dict, Union


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Calcula o hash SHA-256 da configuração efetiva do run.

    Política de hashing (v1):
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos
        - Codificação UTF-8

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_document_hash(document: Union[str, bytes]) -> str:
    """Hash SHA-256 do texto literal do documento (sem normalização)."""
    if isinstance(document, str):
        document = document.encode("utf-8")
    return hashlib.sha256(document).hexdigest()
