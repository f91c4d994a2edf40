"""StructlogAutostakeObserver — production observer that delegates to structlog."""

import structlog


class StructlogAutostakeObserver:
    """Logs orchestration domain events to structlog.

    Does NOT inherit from AutostakeObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def invalid_network_name(self, name: str, configured: list[str]) -> None:
        self._log.error(
            "autostake.invalid_network_name",
            name=name,
            configured=configured,
        )

    def network_skipped(self, network: str, reason: str) -> None:
        self._log.debug("autostake.network.skipped", network=network, reason=reason)

    def network_started(self, network: str, max_retries: int) -> None:
        self._log.info(
            "autostake.network.started",
            network=network,
            max_retries=max_retries,
        )

    def network_no_work(self, network: str, reason: str) -> None:
        self._log.info("autostake.network.no_work", network=network, reason=reason)

    def network_completed(self, network: str, status: str, attempts: int) -> None:
        log = self._log.info if status != "failed" else self._log.error
        log(
            "autostake.network.completed",
            network=network,
            status=status,
            attempts=attempts,
        )

    def attempt_started(
        self,
        network: str,
        attempt: int,
        max_attempts: int,
        addresses: list[str] | None,
    ) -> None:
        self._log.info(
            "autostake.attempt.started",
            network=network,
            attempt=attempt,
            max_attempts=max_attempts,
            restricted_addresses=len(addresses) if addresses is not None else None,
        )

    def attempt_succeeded(self, network: str, attempt: int) -> None:
        self._log.info("autostake.attempt.succeeded", network=network, attempt=attempt)

    def attempt_failed(
        self,
        network: str,
        attempt: int,
        max_attempts: int,
        reason: str | None,
        force_fail: bool,
    ) -> None:
        self._log.error(
            "autostake.attempt.failed",
            network=network,
            attempt=attempt,
            max_attempts=max_attempts,
            reason=reason,
            force_fail=force_fail,
        )

    def attempt_retry(
        self,
        network: str,
        attempt: int,
        delay_seconds: float,
        addresses: list[str] | None,
    ) -> None:
        self._log.warning(
            "autostake.attempt.retry",
            network=network,
            attempt=attempt,
            delay_seconds=delay_seconds,
            restricted_addresses=len(addresses) if addresses is not None else None,
        )

    def failed_addresses_unavailable(
        self, network: str, attempt: int, reason: str
    ) -> None:
        self._log.warning(
            "autostake.attempt.failed_addresses_unavailable",
            network=network,
            attempt=attempt,
            reason=reason,
        )
