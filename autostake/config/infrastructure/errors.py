"""Error types raised by config infrastructure."""

from collections.abc import Mapping
from pathlib import Path

from autostake.core.errors import AutostakeError


class MissingEnvVarsError(AutostakeError):
    """Raised when network records reference environment variables that are not set."""

    def __init__(self, missing: Mapping[str, list[str]]) -> None:
        self.missing = dict(missing)
        self.missing_vars = sorted(missing)
        var_list = ", ".join(
            f"{name} ({', '.join(missing[name])})" for name in self.missing_vars
        )
        super().__init__(
            f"Failed to load networks: missing environment variables: {var_list}"
        )


class ConfigValidationError(AutostakeError):
    """Raised when the loaded network data fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate networks: {reason}")


class ConfigLoadError(AutostakeError):
    """Raised when the networks file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to load networks: file not found: {path}")


class MissingMnemonicError(AutostakeError):
    """Raised at startup when no bot mnemonic is available."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(
            f"Failed to start autostake: please provide a {env_var} environment variable"
        )
