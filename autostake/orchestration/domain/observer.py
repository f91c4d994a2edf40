"""Observer port for the orchestration domain — defines events in domain language."""

from typing import Protocol


class AutostakeObserver(Protocol):
    """Observer port emitting structured events during an autostake run.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def invalid_network_name(self, name: str, configured: list[str]) -> None: ...

    def network_skipped(self, network: str, reason: str) -> None: ...

    def network_started(self, network: str, max_retries: int) -> None: ...

    def network_no_work(self, network: str, reason: str) -> None: ...

    def network_completed(self, network: str, status: str, attempts: int) -> None: ...

    def attempt_started(
        self,
        network: str,
        attempt: int,
        max_attempts: int,
        addresses: list[str] | None,
    ) -> None: ...

    def attempt_succeeded(self, network: str, attempt: int) -> None: ...

    def attempt_failed(
        self,
        network: str,
        attempt: int,
        max_attempts: int,
        reason: str | None,
        force_fail: bool,
    ) -> None: ...

    def attempt_retry(
        self,
        network: str,
        attempt: int,
        delay_seconds: float,
        addresses: list[str] | None,
    ) -> None: ...

    def failed_addresses_unavailable(
        self, network: str, attempt: int, reason: str
    ) -> None: ...
