"""Startup credential lookup for the bot wallet."""

from collections.abc import Mapping

from autostake.config.infrastructure.errors import MissingMnemonicError

MNEMONIC_ENV_VAR = "MNEMONIC"


def load_mnemonic(environ: Mapping[str, str], env_var: str = MNEMONIC_ENV_VAR) -> str:
    """Return the bot mnemonic from the environment.

    Raises:
        MissingMnemonicError: if the variable is unset or blank.
    """
    mnemonic = environ.get(env_var, "").strip()
    if not mnemonic:
        raise MissingMnemonicError(env_var=env_var)
    return mnemonic
