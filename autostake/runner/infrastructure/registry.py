"""Runner factory registry — resolves a NetworkRunnerFactory from an import path."""

import importlib

from autostake.runner.domain.factory import NetworkRunnerFactory
from autostake.runner.infrastructure.errors import RunnerFactoryNotFoundError


def create_runner_factory(
    import_path: str, mnemonic: str, dry_run: bool = False
) -> NetworkRunnerFactory:
    """Import ``module:attribute`` and call it to build the runner factory.

    The attribute is called as ``builder(mnemonic=..., dry_run=...)``.

    Raises:
        RunnerFactoryNotFoundError: if the path is malformed, the module cannot
            be imported, or the attribute is missing or not callable.
    """
    module_name, _, attribute = import_path.partition(":")
    if not module_name or not attribute:
        raise RunnerFactoryNotFoundError(
            import_path=import_path, reason="expected 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RunnerFactoryNotFoundError(
            import_path=import_path, reason=str(exc)
        ) from exc

    builder = getattr(module, attribute, None)
    if builder is None or not callable(builder):
        raise RunnerFactoryNotFoundError(
            import_path=import_path,
            reason=f"'{attribute}' is not a callable in {module_name}",
        )

    return builder(mnemonic=mnemonic, dry_run=dry_run)
