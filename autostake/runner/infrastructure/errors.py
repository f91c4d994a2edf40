"""Error types raised by runner infrastructure."""

from autostake.core.errors import AutostakeError


class NoEligibleWorkError(AutostakeError):
    """Raised by a runner factory when a network has no work for this bot.

    This is a skip, not a failure: the network is not retried and no terminal
    health report is sent.
    """

    def __init__(self, network: str, reason: str) -> None:
        self.network = network
        self.reason = reason
        super().__init__(f"Failed to find eligible work on {network}: {reason}")


class RunnerFactoryNotFoundError(AutostakeError):
    """Raised when the configured runner factory import path cannot be resolved."""

    def __init__(self, import_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to load runner factory '{import_path}': {reason}"
        )
