"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def networks_loaded(self, path: str, total_networks: int) -> None: ...

    def overrides_applied(self, path: str, network_names: list[str]) -> None: ...

    def overrides_invalid(self, path: str, reason: str) -> None: ...
