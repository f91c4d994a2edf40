"""Fake ConfigObserver for use in tests — records events without mocking."""


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[dict[str, object]] = []
        self.applied: list[dict[str, object]] = []
        self.invalid: list[dict[str, str]] = []

    def networks_loaded(self, path: str, total_networks: int) -> None:
        self.loaded.append({"path": path, "total_networks": total_networks})

    def overrides_applied(self, path: str, network_names: list[str]) -> None:
        self.applied.append({"path": path, "network_names": network_names})

    def overrides_invalid(self, path: str, reason: str) -> None:
        self.invalid.append({"path": path, "reason": reason})
