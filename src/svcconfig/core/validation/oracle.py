# src/svcconfig/core/validation/oracle.py
"""
Oráculo de validação semântica baseado em um cliente gRPC real.

"Esta service config é aceitável?" não tem resposta estática: depende de
toda a lógica de parsing de políticas do runtime (nomes de política de
load balancing, faixas numéricas de retry, sintaxe dos matchers). Este
módulo usa um dial real como verdade de referência.

Componentes principais:
    - SemanticValidator → contrato (Protocol) consumido pelo engine
    - LocalOracle       → servidor gRPC vazio numa porta TCP efêmera
    - GrpcDialValidator → dial bloqueante com o documento como default

Decisões arquiteturais:
    - O oráculo é iniciado uma vez por run e compartilhado (somente como
      alvo de conexão) por todas as validações
    - Cada validação abre e sempre fecha seu próprio canal
    - O dial tem limite explícito (`dial_timeout_seconds`); um canal que
      não chega a READY dentro do limite é tratado como rejeição
    - Configs fornecidas pelo resolver DNS são desabilitadas para que
      apenas o documento candidato seja avaliado

Invariantes:
    - `shutdown()` só retorna após o servidor terminar por completo
    - `shutdown()` é idempotente

Limites explícitos:
    - Não interpreta o documento; apenas observa o veredicto do cliente
    - Não registra serviços no servidor local
"""

from __future__ import annotations

from concurrent import futures
from typing import Optional, Protocol, runtime_checkable

import grpc

from ..errors import oracle_setup_error, service_config_semantic_error
from ..exceptions import OracleSetupError, ServiceConfigSemanticError


@runtime_checkable
class SemanticValidator(Protocol):
    """
    Contrato de validação semântica de um documento.

    Implementações levantam `ServiceConfigSemanticError` quando o
    documento é rejeitado. Testes unitários usam fakes com comportamento
    roteirizado; o `GrpcDialValidator` é reservado a testes de integração.
    """

    def validate(
        self,
        document: str,
        *,
        service: Optional[str] = None,
        provenance: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        ...


class LocalOracle:
    """Servidor gRPC sem serviços, escutando numa porta local efêmera."""

    def __init__(self, host: str = "localhost", max_workers: int = 1) -> None:
        self.host = host
        self.max_workers = max_workers
        self._server: Optional[grpc.Server] = None
        self._address: Optional[str] = None

    @property
    def address(self) -> str:
        if self._address is None:
            raise RuntimeError("oracle is not running")
        return self._address

    @property
    def running(self) -> bool:
        return self._server is not None

    def start(self) -> str:
        if self._server is not None:
            return self.address

        target = f"{self.host}:0"
        server = grpc.server(futures.ThreadPoolExecutor(max_workers=self.max_workers))
        try:
            port = server.add_insecure_port(target)
        except RuntimeError as e:
            server.stop(None)
            raise OracleSetupError.from_payload(
                oracle_setup_error(address=target, reason=str(e))
            ) from e
        if not port:
            server.stop(None)
            raise OracleSetupError.from_payload(
                oracle_setup_error(address=target, reason="failed to bind an ephemeral port")
            )

        server.start()
        self._server = server
        self._address = f"{self.host}:{port}"
        return self._address

    def shutdown(self) -> None:
        server, self._server = self._server, None
        self._address = None
        if server is None:
            return
        # stop() devolve um Event sinalizado quando o servidor termina
        server.stop(grace=None).wait()

    def __enter__(self) -> "LocalOracle":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


class GrpcDialValidator:
    """Valida um documento tentando conectar ao oráculo com ele como default."""

    def __init__(self, address: str, dial_timeout_seconds: float = 5.0) -> None:
        self.address = address
        self.dial_timeout_seconds = dial_timeout_seconds

    def _options(self, document: str):
        return [
            ("grpc.service_config", document),
            ("grpc.service_config_disable_resolution", 1),
        ]

    def validate(
        self,
        document: str,
        *,
        service: Optional[str] = None,
        provenance: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        channel = grpc.insecure_channel(self.address, options=self._options(document))
        try:
            grpc.channel_ready_future(channel).result(timeout=self.dial_timeout_seconds)
        except grpc.FutureTimeoutError as e:
            raise ServiceConfigSemanticError.from_payload(
                service_config_semantic_error(
                    service=service,
                    provenance=provenance,
                    source=source,
                    reason=(
                        f"channel to {self.address} not ready after "
                        f"{self.dial_timeout_seconds}s; the client rejected the service config"
                    ),
                )
            ) from e
        finally:
            channel.close()
