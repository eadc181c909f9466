# src/svcconfig/core/validation/syntax.py
"""
Verificador sintático de service configs.

Extrai de um documento JSON apenas a forma necessária para a verificação
de cobertura: `methodConfig[].name[].{service, method}`.

Componentes:
    - MethodName / MethodConfigEntry / ServiceConfigShape: forma mínima
    - parse_service_config: parse + extração da forma
    - check_syntax: apenas o veredicto

Invariantes:
    - A raiz deve ser um objeto JSON
    - `null` equivale a campo ausente; campos desconhecidos são ignorados
    - Toda falha vira `ServiceConfigSyntaxError` citando serviço, proveniência
      e fonte do documento
    - O veredicto é idempotente

Limites explícitos:
    - Não valida semântica (políticas, durações, retry); isso é do oráculo
    - Chaves são comparadas de forma exata (case-sensitive)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from ..errors import service_config_syntax_error
from ..exceptions import ServiceConfigSyntaxError


@dataclass(frozen=True)
class MethodName:
    """Par `{service, method}`; string vazia significa wildcard."""

    service: str = ""
    method: str = ""


@dataclass(frozen=True)
class MethodConfigEntry:
    names: Tuple[MethodName, ...] = ()


@dataclass(frozen=True)
class ServiceConfigShape:
    """Forma mínima de uma service config: apenas o roteamento por nome."""

    method_configs: Tuple[MethodConfigEntry, ...] = ()


class _ShapeError(Exception):
    pass


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise _ShapeError(msg)


def _optional_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    _expect(isinstance(value, str), f"{where} must be a string")
    return value


def _parse_shape(data: Any) -> ServiceConfigShape:
    _expect(isinstance(data, dict), "service config root must be an object")

    raw_entries = data.get("methodConfig")
    if raw_entries is None:
        return ServiceConfigShape()
    _expect(isinstance(raw_entries, list), "methodConfig must be an array")

    entries: List[MethodConfigEntry] = []
    for i, raw_entry in enumerate(raw_entries):
        _expect(isinstance(raw_entry, dict), f"methodConfig[{i}] must be an object")
        raw_names = raw_entry.get("name")
        if raw_names is None:
            entries.append(MethodConfigEntry())
            continue
        _expect(isinstance(raw_names, list), f"methodConfig[{i}].name must be an array")

        names: List[MethodName] = []
        for j, raw_name in enumerate(raw_names):
            _expect(isinstance(raw_name, dict), f"methodConfig[{i}].name[{j}] must be an object")
            names.append(
                MethodName(
                    service=_optional_str(raw_name.get("service"), f"methodConfig[{i}].name[{j}].service"),
                    method=_optional_str(raw_name.get("method"), f"methodConfig[{i}].name[{j}].method"),
                )
            )
        entries.append(MethodConfigEntry(names=tuple(names)))

    return ServiceConfigShape(method_configs=tuple(entries))


def parse_service_config(
    document: Union[str, bytes],
    *,
    source: Optional[str] = None,
    service: Optional[str] = None,
    provenance: Optional[str] = None,
) -> ServiceConfigShape:
    """Parseia um documento e extrai sua forma de roteamento.

    Campos desconhecidos são ignorados; `null` equivale a campo ausente.

    Raises:
        ServiceConfigSyntaxError: JSON inválido, aninhamento além do limite
            do parser ou forma incompatível, nomeando a fonte do documento.
    """
    try:
        if isinstance(document, bytes):
            document = document.decode("utf-8")
        data = json.loads(document)
        return _parse_shape(data)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError, _ShapeError) as e:
        raise ServiceConfigSyntaxError.from_payload(
            service_config_syntax_error(
                service=service,
                provenance=provenance,
                source=source,
                reason=str(e),
            )
        ) from e


def check_syntax(document: Union[str, bytes], **kwargs: Any) -> None:
    """Apenas o veredicto de `parse_service_config`."""
    parse_service_config(document, **kwargs)
