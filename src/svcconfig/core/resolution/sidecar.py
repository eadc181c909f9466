"""
Leitura memoizada de arquivos sidecar de service config.

Um sidecar é o arquivo `<parent>_grpc_service_config.json` ao lado do
.proto que declara o serviço. Vários serviços do mesmo pacote apontam
para o mesmo sidecar, então o conteúdo é lido do disco uma única vez por
caminho resolvido dentro de um run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

from ..errors import sidecar_read_error
from ..exceptions import SidecarReadError


SIDECAR_SUFFIX = "_grpc_service_config.json"


def sidecar_file_name(parent_package_name: str) -> str:
    return parent_package_name + SIDECAR_SUFFIX


def _read_utf8(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class SidecarReader:
    """Cache de conteúdo por caminho resolvido; `reads` conta acessos reais ao disco.

    `read_text` é injetável para testes (spy de leituras).
    """

    def __init__(self, read_text: Callable[[Path], str] = _read_utf8) -> None:
        self._read_text = read_text
        self._cache: Dict[Path, str] = {}
        self.reads = 0

    @staticmethod
    def _key(path: Path) -> Path:
        return path.resolve()

    def exists(self, path: Path) -> bool:
        return self._key(path) in self._cache or path.exists()

    def read(self, path: Path, *, service: Optional[str] = None) -> str:
        key = self._key(path)
        if key in self._cache:
            return self._cache[key]

        self.reads += 1
        try:
            text = self._read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SidecarReadError.from_payload(
                sidecar_read_error(service=service, source=str(path), reason=str(e))
            ) from e

        self._cache[key] = text
        return text
