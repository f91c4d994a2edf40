"""Network configuration models — one NetworkConfig per configured chain."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_RETRIES = 2
DEFAULT_RETRY_DELAY_SECONDS = 30.0
DEFAULT_HEALTHCHECK_ADDRESS = "https://hc-ping.com"


class AutostakeSettings(BaseModel, frozen=True):
    """Per-network overrides for the autostake run.

    ``retries`` and ``retry_delay_seconds`` are optional so that an absent key
    can be told apart from an explicit zero; use ``max_retries`` and
    ``retry_delay`` to read the effective values.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    retries: int | None = Field(default=None, ge=0)
    slip44: int | None = None
    correct_slip44: bool = Field(default=False, alias="correctSlip44")
    retry_delay_seconds: float | None = Field(
        default=None, ge=0, alias="retryDelaySeconds"
    )

    @property
    def max_retries(self) -> int:
        if self.retries is None:
            return DEFAULT_MAX_RETRIES
        return self.retries

    @property
    def retry_delay(self) -> float:
        if self.retry_delay_seconds is None:
            return DEFAULT_RETRY_DELAY_SECONDS
        return self.retry_delay_seconds


class HealthCheckConfig(BaseModel, frozen=True):
    """Where to deliver the health report for a network.

    A missing ``uuid`` means reports are only written to the local log.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    uuid: str | None = None
    address: str = Field(default=DEFAULT_HEALTHCHECK_ADDRESS, min_length=1)
    timeout_seconds: float = Field(default=10.0, gt=0, alias="timeout")


class NetworkConfig(BaseModel, frozen=True):
    """A single target network as loaded for one run.

    Keys the orchestration engine does not interpret (``prefix``, ``restUrl``,
    ``gasPrice`` and so on) are kept as extra fields for the runner factory.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str = Field(min_length=1)
    enabled: bool = True
    autostake: AutostakeSettings = Field(default_factory=AutostakeSettings)
    health_check: HealthCheckConfig = Field(
        default_factory=HealthCheckConfig, alias="healthCheck"
    )
