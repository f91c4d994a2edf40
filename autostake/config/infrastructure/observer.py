"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def networks_loaded(self, path: str, total_networks: int) -> None:
        self._log.info("config.networks_loaded", path=path, total=total_networks)

    def overrides_applied(self, path: str, network_names: list[str]) -> None:
        self._log.info(
            "config.overrides_applied", path=path, network_names=network_names
        )

    def overrides_invalid(self, path: str, reason: str) -> None:
        self._log.warning(
            "config.overrides_invalid",
            path=path,
            reason=reason,
            message="Failed to parse overrides, check JSON is valid",
        )
