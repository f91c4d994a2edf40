"""Structlog implementation of the HealthObserver port."""

import structlog


class StructlogHealthObserver:
    """Delegates health domain events to structlog.

    Satisfies the HealthObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def report_started(self, network: str, marker: str) -> None:
        self._log.info("health.started", network=network, marker=marker)

    def report_line(self, network: str, line: str) -> None:
        self._log.info("health.log", network=network, line=line)

    def report_flushed(
        self, network: str, status: str | None, total_lines: int
    ) -> None:
        self._log.debug(
            "health.flushed",
            network=network,
            status=status,
            total_lines=total_lines,
        )

    def ping_skipped(self, network: str, url: str, reason: str) -> None:
        self._log.debug("health.ping_skipped", network=network, url=url, reason=reason)

    def ping_failed(self, network: str, url: str, reason: str) -> None:
        self._log.warning("health.ping_failed", network=network, url=url, reason=reason)
