"""NetworkRunnerFactory Protocol — structural interface for constructing runners."""

from typing import Protocol

from autostake.config.domain.network import NetworkConfig
from autostake.runner.domain.runner import NetworkRunner


class NetworkRunnerFactory(Protocol):
    """Constructs a new NetworkRunner for one attempt against a network.

    Construction may perform I/O (loading chain data, resolving the operator,
    connecting to a REST endpoint). Implementations raise NoEligibleWorkError
    when the bot has nothing to do on the network, e.g. it is not an operator
    there or the chain lacks authz support. Any other exception counts as a
    failed attempt.
    """

    async def create(self, network: NetworkConfig) -> NetworkRunner: ...
