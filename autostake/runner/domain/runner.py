"""NetworkRunner Protocol — structural interface for one autostake attempt."""

from typing import Protocol

from autostake.runner.domain.result import TxResult


class NetworkRunner(Protocol):
    """Stateful capability performing one claim-and-restake attempt on a network.

    A fresh instance is constructed for every attempt. After ``run`` returns,
    the instance exposes the outcome of that attempt:

    - ``did_succeed()`` — overall success flag.
    - ``error`` — failure message, if any.
    - ``results`` — per-transaction results in send order.
    - ``failed_addresses()`` — the delegator addresses that failed and should
      be retried; empty when there is nothing to narrow down.
    - ``force_fail`` — the failure is not transient and must not be retried.
    - ``query_errors()`` — pre-formatted log lines for errors hit while
      querying the chain.
    """

    error: str | None
    results: list[TxResult]
    force_fail: bool

    async def run(self, addresses: list[str] | None = None) -> None: ...

    def did_succeed(self) -> bool: ...

    def failed_addresses(self) -> list[str]: ...

    def query_errors(self) -> list[str]: ...
