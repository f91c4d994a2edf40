"""FakeNetworkRunnerFactory — in-memory NetworkRunnerFactory for use in tests."""

from autostake.config.domain.network import NetworkConfig
from autostake.runner.domain.runner import NetworkRunner
from tests.runner.fake_runner import FakeNetworkRunner


class FakeNetworkRunnerFactory:
    """Satisfies the NetworkRunnerFactory protocol.

    Each successive create() call pops from the front of ``side_effects``:
    - If the item is an Exception, it is raised.
    - If the item is a runner, it is returned.
    Once exhausted, a succeeding FakeNetworkRunner is returned.
    """

    def __init__(
        self,
        side_effects: list[FakeNetworkRunner | Exception] | None = None,
    ) -> None:
        self._side_effects: list[FakeNetworkRunner | Exception] = (
            list(side_effects) if side_effects is not None else []
        )
        self.created: list[str] = []

    async def create(self, network: NetworkConfig) -> NetworkRunner:
        self.created.append(network.name)
        if self._side_effects:
            effect = self._side_effects.pop(0)
            if isinstance(effect, Exception):
                raise effect
            return effect
        return FakeNetworkRunner()


def build_fake_factory(mnemonic: str, dry_run: bool = False) -> FakeNetworkRunnerFactory:
    """Builder resolved by import path in registry and CLI tests."""
    return FakeNetworkRunnerFactory()


NOT_CALLABLE = "not a builder"
