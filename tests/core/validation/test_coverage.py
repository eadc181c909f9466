# tests/core/validation/test_coverage.py
"""
Testes da verificação de cobertura.

Regra: um serviço está coberto por um wildcard global `{}` ou por
`{"service": "<nome completo>"}` sem método. Entradas de método nunca
implicam cobertura do serviço.
"""

import pytest

from svcconfig.core.validation import is_covered, parse_service_config


def _covered(document: str, service: str) -> bool:
    return is_covered(parse_service_config(document), service)


@pytest.mark.parametrize("service", ["pkg.Svc", "demo.A", "einride.example.v1.FooService"])
def test_global_wildcard_covers_any_service(service):
    assert _covered('{"methodConfig":[{"name":[{}]}]}', service)


def test_service_wildcard_covers_only_that_service():
    document = '{"methodConfig":[{"name":[{"service":"pkg.Svc"}]}]}'
    assert _covered(document, "pkg.Svc")
    assert not _covered(document, "pkg.Other")


def test_other_service_does_not_cover():
    assert not _covered('{"methodConfig":[{"name":[{"service":"pkg.Other"}]}]}', "pkg.Svc")


def test_method_only_entry_does_not_cover():
    assert not _covered('{"methodConfig":[{"name":[{"method":"Get"}]}]}', "pkg.Svc")


def test_specific_method_does_not_cover_service():
    assert not _covered('{"methodConfig":[{"name":[{"service":"pkg.Svc","method":"Get"}]}]}', "pkg.Svc")


def test_any_matching_name_in_any_entry_covers():
    document = (
        '{"methodConfig":['
        '{"name":[{"service":"pkg.Svc","method":"Get"}]},'
        '{"name":[{"service":"pkg.Other"},{"service":"pkg.Svc"}]}'
        "]}"
    )
    assert _covered(document, "pkg.Svc")


def test_document_without_method_config_covers_nothing():
    assert not _covered('{"loadBalancingConfig":[{"round_robin":{}}]}', "pkg.Svc")
