"""Observer port for the health domain — defines events in domain language."""

from typing import Protocol


class HealthObserver(Protocol):
    def report_started(self, network: str, marker: str) -> None: ...

    def report_line(self, network: str, line: str) -> None: ...

    def report_flushed(
        self, network: str, status: str | None, total_lines: int
    ) -> None: ...

    def ping_skipped(self, network: str, url: str, reason: str) -> None: ...

    def ping_failed(self, network: str, url: str, reason: str) -> None: ...
